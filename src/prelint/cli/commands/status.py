"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prelint.config.models import PrelintConfig

from prelint.bootstrap.paths import get_prelint_home
from prelint.cli.commands import Command
from prelint.cli.exit_codes import EXIT_SUCCESS
from prelint.config.loader import get_default_config
from prelint.discovery import first_configuration_file_in_parent_directories
from prelint.errors import PrelintPluginError
from prelint.locator import ToolLocator


class StatusCommand(Command):
    """Shows tool location and configuration sources."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current prelint version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: "PrelintConfig | None" = None) -> int:
        """Execute the status command.

        Returns:
            Exit code (always 0 for status).
        """
        config = config or get_default_config()
        package_directory = Path(getattr(args, "path", ".")).resolve()

        print(f"prelint version: {self._version}")
        print(f"Home: {get_prelint_home()}")
        print()

        try:
            tool_status = str(ToolLocator(config.tool).locate())
        except PrelintPluginError as e:
            tool_status = f"not available ({e})"
        print(f"Tool: {config.tool.name} [{config.tool.locator}]: {tool_status}")
        print(f"Search paths: {', '.join(config.tool.search_paths) or '(PATH only)'}")

        lint_config = first_configuration_file_in_parent_directories(
            package_directory, config.configuration_files
        )
        print(f"Lint configuration: {lint_config or 'none found'}")

        sources = config.sources
        print(f"prelint configuration: {', '.join(sources) if sources else 'defaults'}")

        return EXIT_SUCCESS
