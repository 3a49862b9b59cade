"""Configuration file loading and merging.

Handles loading configuration from YAML files with:
- Project-level config (.prelint.yml) in the package directory
- Global config ($PRELINT_HOME/config/config.yml)
- Environment variable expansion (${VAR})
- Config merging with proper precedence
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from prelint.bootstrap.paths import PrelintPaths, get_prelint_home
from prelint.config.models import (
    DEFAULT_CONFIGURATION_FILES,
    DEFAULT_SEARCH_PATHS,
    DEFAULT_SHELL,
    DEFAULT_SOURCE_SUFFIXES,
    DEFAULT_TOOL_NAME,
    LOCATOR_WHICH,
    PrelintConfig,
    ToolConfig,
)
from prelint.config.validation import is_error, validate_config
from prelint.core.logging import get_logger

LOGGER = get_logger(__name__)

# Config file names
PROJECT_CONFIG_NAMES = [".prelint.yml", ".prelint.yaml", "prelint.yml", "prelint.yaml"]
GLOBAL_CONFIG_NAME = "config.yml"

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def load_config(
    project_root: Path,
    cli_config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> PrelintConfig:
    """Load configuration with proper precedence.

    Precedence (highest to lowest):
    1. CLI flags (cli_overrides)
    2. Custom config file (cli_config_path) OR project config (.prelint.yml)
    3. Global config ($PRELINT_HOME/config/config.yml)
    4. Built-in defaults

    Args:
        project_root: Package directory for finding .prelint.yml.
        cli_config_path: Optional path to custom config file (--config-file flag).
        cli_overrides: Dict of CLI flag overrides.

    Returns:
        Merged PrelintConfig instance.

    Raises:
        ConfigError: If the config file doesn't exist, has parse errors,
            or holds values that cannot be used.
    """
    sources: List[str] = []
    merged: Dict[str, Any] = {}

    # Layer 1: Global config
    global_path = find_global_config()
    if global_path and global_path.exists():
        try:
            global_dict = load_yaml_file(global_path)
            _check(global_dict, str(global_path))
            merged = merge_configs(merged, global_dict)
            sources.append(f"global:{global_path}")
            LOGGER.debug(f"Loaded global config from {global_path}")
        except (ConfigError, yaml.YAMLError, OSError) as e:
            LOGGER.warning(f"Failed to load global config: {e}")

    # Layer 2: Project or custom config
    if cli_config_path:
        if not cli_config_path.exists():
            raise ConfigError(f"Config file not found: {cli_config_path}")
        config_path: Optional[Path] = cli_config_path
        label = "custom"
    else:
        config_path = find_project_config(project_root)
        label = "project"

    if config_path and config_path.exists():
        try:
            project_dict = load_yaml_file(config_path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        _check(project_dict, str(config_path))
        merged = merge_configs(merged, project_dict)
        sources.append(f"{label}:{config_path}")
        LOGGER.debug(f"Loaded {label} config from {config_path}")

    # Layer 3: CLI overrides
    if cli_overrides:
        merged = merge_configs(merged, cli_overrides)
        sources.append("cli")
        LOGGER.debug("Applied CLI overrides")

    config = dict_to_config(merged)
    config._config_sources = sources

    LOGGER.debug(f"Config loaded from sources: {sources}")
    return config


def _check(data: Dict[str, Any], source: str) -> None:
    """Raise ConfigError on the first validation error in data."""
    for warning in validate_config(data, source):
        if is_error(warning):
            raise ConfigError(f"{warning.message} in {source}")


def find_project_config(project_root: Path) -> Optional[Path]:
    """Find config file in the package directory.

    Args:
        project_root: Directory to search in.

    Returns:
        Path to config file if found, None otherwise.
    """
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def find_global_config() -> Optional[Path]:
    """Find global config at $PRELINT_HOME/config/config.yml.

    Returns:
        Path to global config if it exists, None otherwise.
    """
    config_path = PrelintPaths(get_prelint_home()).config_dir / GLOBAL_CONFIG_NAME
    if config_path.exists():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed dictionary.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        FileNotFoundError: If file doesn't exist.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.

    Args:
        data: Config data (dict, list, or scalar).

    Returns:
        Data with environment variables expanded.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two config dicts, with overlay taking precedence.

    Rules:
    - Scalar values: overlay replaces base
    - Lists: overlay replaces base (no merging)
    - Dicts: recursive merge

    Args:
        base: Base configuration dictionary.
        overlay: Overlay configuration to merge on top.

    Returns:
        Merged configuration dictionary.
    """
    result = base.copy()

    for key, overlay_value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(overlay_value, dict):
            result[key] = merge_configs(result[key], overlay_value)
        else:
            result[key] = overlay_value

    return result


def dict_to_config(data: Dict[str, Any]) -> PrelintConfig:
    """Convert validated dict to typed PrelintConfig.

    Args:
        data: Configuration dictionary.

    Returns:
        Typed PrelintConfig instance.
    """
    tool_data = data.get("tool") or {}
    tool = ToolConfig(
        name=_value(tool_data, "name", DEFAULT_TOOL_NAME),
        search_paths=list(_value(tool_data, "search_paths", DEFAULT_SEARCH_PATHS)),
        locator=_value(tool_data, "locator", LOCATOR_WHICH),
        shell=_value(tool_data, "shell", DEFAULT_SHELL),
    )

    timeout = data.get("timeout")

    return PrelintConfig(
        tool=tool,
        configuration_files=list(_value(data, "configuration_files", DEFAULT_CONFIGURATION_FILES)),
        source_suffixes=list(_value(data, "source_suffixes", DEFAULT_SOURCE_SUFFIXES)),
        ignore=list(_value(data, "ignore", [])),
        timeout=float(timeout) if timeout is not None else None,
    )


def _value(data: Dict[str, Any], key: str, default: Any) -> Any:
    """Return data[key], falling back to default when missing or empty (YAML null)."""
    value = data.get(key)
    return default if value is None else value


def get_default_config() -> PrelintConfig:
    """Get default configuration.

    Returns:
        Default PrelintConfig instance.
    """
    return PrelintConfig()
