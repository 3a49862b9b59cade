"""Lint command implementation."""

from __future__ import annotations

import subprocess
from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prelint.config.models import PrelintConfig

from prelint.cli.commands import Command
from prelint.cli.commands.plan import plan_package
from prelint.cli.exit_codes import EXIT_PLUGIN_ERROR, EXIT_SUCCESS
from prelint.config.loader import get_default_config
from prelint.core.logging import get_logger
from prelint.executor import execute

LOGGER = get_logger(__name__)


class LintCommand(Command):
    """Plans and runs SwiftLint over a package's sources."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "lint"

    def execute(self, args: Namespace, config: "PrelintConfig | None" = None) -> int:
        """Execute the lint command.

        A missing tool is only a warning, so the command succeeds without
        linting. Otherwise the tool's exit code is returned.

        Args:
            args: Parsed command-line arguments.
            config: prelint configuration.

        Returns:
            Exit code of the lint tool, or 2 on plugin error.
        """
        config = config or get_default_config()
        _, result = plan_package(args, config)

        if result.has_errors:
            return EXIT_PLUGIN_ERROR
        if not result.commands:
            return EXIT_SUCCESS

        try:
            return execute(result.commands, cwd=Path(args.path).resolve(), timeout=config.timeout)
        except subprocess.TimeoutExpired:
            LOGGER.error(f"Lint timed out after {config.timeout} seconds")
            return EXIT_PLUGIN_ERROR
