"""Configuration validation for prelint.

Validates known configuration keys and warns on unknown keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

import yaml

from prelint.config.models import VALID_LOCATORS
from prelint.core.logging import get_logger

LOGGER = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config will fail at runtime
    WARNING = "warning"  # Likely mistake but config usable


@dataclass
class ConfigValidationIssue:
    """A validation issue for configuration with severity."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


VALID_TOP_LEVEL_KEYS: Set[str] = {
    "version",
    "tool",
    "configuration_files",
    "source_suffixes",
    "ignore",
    "timeout",
}

VALID_TOOL_KEYS: Set[str] = {
    "name",
    "search_paths",
    "locator",
    "shell",
}

# Keys whose values must be lists of strings
STRING_LIST_KEYS: Tuple[str, ...] = ("configuration_files", "source_suffixes", "ignore")


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate configuration dictionary.

    Does not raise exceptions - returns warnings instead.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):  # type: ignore[unreachable]
        warnings.append(ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings  # type: ignore[unreachable]

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            _add(warnings, ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(key, VALID_TOP_LEVEL_KEYS),
            ))

    for key in STRING_LIST_KEYS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            warnings.append(ConfigValidationWarning(
                message=f"'{key}' must be a list of strings",
                source=source,
                key=key,
            ))

    configuration_files = data.get("configuration_files")
    if isinstance(configuration_files, list) and not configuration_files:
        warnings.append(ConfigValidationWarning(
            message="'configuration_files' must be a non-empty list",
            source=source,
            key="configuration_files",
        ))

    timeout = data.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            warnings.append(ConfigValidationWarning(
                message=f"'timeout' must be a number, got {type(timeout).__name__}",
                source=source,
                key="timeout",
            ))
        elif timeout <= 0:
            warnings.append(ConfigValidationWarning(
                message=f"Invalid value '{timeout}' for 'timeout'. Must be positive",
                source=source,
                key="timeout",
            ))

    tool = data.get("tool")
    if tool is not None:
        if not isinstance(tool, dict):
            warnings.append(ConfigValidationWarning(
                message=f"'tool' must be a mapping, got {type(tool).__name__}",
                source=source,
                key="tool",
            ))
        else:
            warnings.extend(_validate_tool_section(tool, source))

    return warnings


def _validate_tool_section(tool: Dict[str, Any], source: str) -> List[ConfigValidationWarning]:
    warnings: List[ConfigValidationWarning] = []

    for key in tool.keys():
        if key not in VALID_TOOL_KEYS:
            _add(warnings, ConfigValidationWarning(
                message=f"Unknown key 'tool.{key}'",
                source=source,
                key=f"tool.{key}",
                suggestion=_suggest_key(key, VALID_TOOL_KEYS),
            ))

    for key in ("name", "shell"):
        value = tool.get(key)
        if value is not None and (not isinstance(value, str) or not value):
            warnings.append(ConfigValidationWarning(
                message=f"'tool.{key}' must be a non-empty string",
                source=source,
                key=f"tool.{key}",
            ))

    search_paths = tool.get("search_paths")
    if search_paths is not None and (
        not isinstance(search_paths, list)
        or not all(isinstance(p, str) for p in search_paths)
    ):
        warnings.append(ConfigValidationWarning(
            message="'tool.search_paths' must be a list of strings",
            source=source,
            key="tool.search_paths",
        ))

    locator = tool.get("locator")
    if locator is not None and locator not in VALID_LOCATORS:
        _add(warnings, ConfigValidationWarning(
            message=f"Invalid value '{locator}' for 'tool.locator'. "
                    f"Valid values: {', '.join(VALID_LOCATORS)}",
            source=source,
            key="tool.locator",
            suggestion=_suggest_key(str(locator), set(VALID_LOCATORS)),
        ))

    return warnings


def _add(warnings: List[ConfigValidationWarning], warning: ConfigValidationWarning) -> None:
    warnings.append(warning)
    _log_warning(warning)


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)


def is_error(warning: ConfigValidationWarning) -> bool:
    """Whether a warning describes a value that will fail at runtime.

    Type mismatches and invalid values are errors; unknown keys are not.
    """
    return any(phrase in warning.message for phrase in [
        "must be a",
        "Invalid value",
        "Config must be",
    ])


def validate_config_file(config_path: Path) -> Tuple[bool, List[ConfigValidationIssue]]:
    """Validate a configuration file from disk.

    Checks file existence, YAML syntax, and configuration semantics.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Tuple of (is_valid, issues) where is_valid is False if any errors exist.
    """
    issues: List[ConfigValidationIssue] = []
    source = str(config_path)

    if not config_path.exists():
        issues.append(ConfigValidationIssue(
            message=f"Configuration file not found: {config_path}",
            source=source,
            severity=ValidationSeverity.ERROR,
        ))
        return False, issues

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        issues.append(ConfigValidationIssue(
            message=f"Invalid YAML syntax: {e}",
            source=source,
            severity=ValidationSeverity.ERROR,
        ))
        return False, issues

    if data is None:
        issues.append(ConfigValidationIssue(
            message="Configuration file is empty",
            source=source,
            severity=ValidationSeverity.WARNING,
        ))
        return True, issues

    for warning in validate_config(data, source):
        issues.append(ConfigValidationIssue(
            message=warning.message,
            source=warning.source,
            severity=ValidationSeverity.ERROR if is_error(warning) else ValidationSeverity.WARNING,
            key=warning.key,
            suggestion=warning.suggestion,
        ))

    has_errors = any(issue.severity == ValidationSeverity.ERROR for issue in issues)
    return not has_errors, issues
