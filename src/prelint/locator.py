"""Locating the SwiftLint executable.

Two strategies are available:

- ``which`` (default): resolve with shutil.which over the fixed search
  prefix followed by the inherited PATH. No shell is spawned.
- ``shell``: run ``PATH="<prefix>:$PATH" which <tool>`` through a shell and
  classify a failure by its output. zsh's builtin ``which`` prints
  "<tool> not found", which is the only output treated as a missing tool.
"""

from __future__ import annotations

import os
import shlex
import shutil
from pathlib import Path
from typing import Optional, Sequence

from prelint.config.models import (
    DEFAULT_SEARCH_PATHS,
    DEFAULT_SHELL,
    DEFAULT_TOOL_NAME,
    LOCATOR_SHELL,
    LOCATOR_WHICH,
    ToolConfig,
)
from prelint.core.logging import get_logger
from prelint.core.subprocess_runner import run_command
from prelint.errors import PrelintPluginError, ToolNotFoundError, UnknownToolError

LOGGER = get_logger(__name__)


def build_search_path(search_paths: Sequence[str], inherited: Optional[str] = None) -> str:
    """Join the fixed prefix directories with the inherited PATH.

    Args:
        search_paths: Directories searched before the inherited PATH.
        inherited: PATH value to append (default: os.environ["PATH"]).

    Returns:
        os.pathsep-separated search path.
    """
    if inherited is None:
        inherited = os.environ.get("PATH", os.defpath)
    parts = [p for p in search_paths if p]
    if inherited:
        parts.append(inherited)
    return os.pathsep.join(parts)


def locate_tool(
    tool_name: str = DEFAULT_TOOL_NAME,
    search_paths: Sequence[str] = tuple(DEFAULT_SEARCH_PATHS),
) -> Path:
    """Resolve the lint executable without spawning a shell.

    Args:
        tool_name: Executable name.
        search_paths: Directories searched before the inherited PATH.

    Returns:
        Path to the executable.

    Raises:
        ToolNotFoundError: If no executable is found.
    """
    resolved = shutil.which(tool_name, path=build_search_path(search_paths))
    if resolved is None:
        raise ToolNotFoundError(tool_name)
    LOGGER.debug(f"Resolved {tool_name} to {resolved}")
    return Path(resolved)


def classify_lookup_failure(output: str, tool_name: str = DEFAULT_TOOL_NAME) -> PrelintPluginError:
    """Map the output of a failed shell lookup to a plugin error.

    Args:
        output: Combined stdout/stderr of the lookup, trailing newlines stripped.
        tool_name: Executable name that was looked up.

    Returns:
        ToolNotFoundError if output is exactly the "not found" marker,
        UnknownToolError carrying the output otherwise.
    """
    if output == f"{tool_name} not found":
        return ToolNotFoundError(tool_name)
    return UnknownToolError(output)


def lookup_with_shell(
    tool_name: str = DEFAULT_TOOL_NAME,
    search_paths: Sequence[str] = tuple(DEFAULT_SEARCH_PATHS),
    shell: str = DEFAULT_SHELL,
) -> Path:
    """Resolve the lint executable by running ``which`` in a shell.

    Blocks until the shell exits.

    Args:
        tool_name: Executable name.
        search_paths: Directories prepended to the shell's PATH.
        shell: Shell used to run the lookup.

    Returns:
        Path printed by ``which``.

    Raises:
        ToolNotFoundError: If the lookup printed the "not found" marker.
        UnknownToolError: On any other non-zero exit.
        OSError: If the shell cannot be started.
    """
    prefix = os.pathsep.join(p for p in search_paths if p)
    path_expr = f"{prefix}{os.pathsep}$PATH" if prefix else "$PATH"
    command = f'PATH="{path_expr}" which {shlex.quote(tool_name)}'
    LOGGER.debug(f"Running: {shell} -c {command}")

    result = run_command([shell, "-c", command], merge_stderr=True)
    output = (result.stdout or "").strip("\n")
    if result.returncode != 0:
        raise classify_lookup_failure(output, tool_name)
    return Path(output)


class ToolLocator:
    """Finds the lint executable using the configured strategy."""

    def __init__(self, config: Optional[ToolConfig] = None) -> None:
        self._config = config or ToolConfig()

    @property
    def tool_name(self) -> str:
        return self._config.name

    def locate(self) -> Path:
        """Resolve the executable.

        Raises:
            ToolNotFoundError: If the tool is not installed.
            UnknownToolError: If a shell lookup failed for another reason.
            ValueError: If the configured strategy is unknown.
        """
        config = self._config
        if config.locator == LOCATOR_WHICH:
            return locate_tool(config.name, config.search_paths)
        if config.locator == LOCATOR_SHELL:
            return lookup_with_shell(config.name, config.search_paths, config.shell)
        raise ValueError(f"Unknown locator strategy: {config.locator}")
