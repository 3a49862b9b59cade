"""Typed configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_TOOL_NAME = "swiftlint"
DEFAULT_SEARCH_PATHS = ["/opt/homebrew/bin"]
DEFAULT_SHELL = "/bin/zsh"
DEFAULT_CONFIGURATION_FILES = [".swiftlint.yml"]
DEFAULT_SOURCE_SUFFIXES = ["swift"]
DEFAULT_IGNORE = [".build/", ".swiftpm/", "DerivedData/"]

LOCATOR_WHICH = "which"
LOCATOR_SHELL = "shell"
VALID_LOCATORS = (LOCATOR_WHICH, LOCATOR_SHELL)


@dataclass
class ToolConfig:
    """How to find the lint executable."""

    name: str = DEFAULT_TOOL_NAME
    search_paths: List[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_PATHS))
    locator: str = LOCATOR_WHICH
    shell: str = DEFAULT_SHELL


@dataclass
class PrelintConfig:
    """Complete prelint configuration."""

    tool: ToolConfig = field(default_factory=ToolConfig)
    configuration_files: List[str] = field(
        default_factory=lambda: list(DEFAULT_CONFIGURATION_FILES)
    )
    source_suffixes: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_SUFFIXES))
    ignore: List[str] = field(default_factory=list)
    timeout: Optional[float] = None

    # Track where config was loaded from
    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        return list(self._config_sources)
