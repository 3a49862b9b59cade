"""Locate command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prelint.config.models import PrelintConfig

from prelint.cli.commands import Command
from prelint.cli.exit_codes import EXIT_PLUGIN_ERROR, EXIT_SUCCESS
from prelint.config.loader import get_default_config
from prelint.core.logging import get_logger
from prelint.errors import ToolNotFoundError, UnknownToolError
from prelint.locator import ToolLocator

LOGGER = get_logger(__name__)


class LocateCommand(Command):
    """Prints the path of the lint executable."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "locate"

    def execute(self, args: Namespace, config: "PrelintConfig | None" = None) -> int:
        config = config or get_default_config()
        locator = ToolLocator(config.tool)
        try:
            path = locator.locate()
        except ToolNotFoundError:
            LOGGER.warning(f"{locator.tool_name} not found")
            return EXIT_PLUGIN_ERROR
        except UnknownToolError as e:
            LOGGER.error(e.output)
            return EXIT_PLUGIN_ERROR

        print(path)
        return EXIT_SUCCESS
