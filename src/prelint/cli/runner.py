"""CLI runner orchestration.

This module handles command dispatch and execution for the prelint CLI.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from prelint.cli.arguments import build_parser
from prelint.cli.commands.lint import LintCommand
from prelint.cli.commands.locate import LocateCommand
from prelint.cli.commands.plan import PlanCommand
from prelint.cli.commands.status import StatusCommand
from prelint.cli.commands.validate import ValidateCommand
from prelint.cli.config_bridge import ConfigBridge
from prelint.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from prelint.config.loader import ConfigError, load_config
from prelint.config.models import PrelintConfig
from prelint.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get prelint version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("prelint")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from prelint import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.plan_cmd = PlanCommand()
        self.lint_cmd = LintCommand()
        self.locate_cmd = LocateCommand()
        self.status_cmd = StatusCommand(version=self._version)
        self.validate_cmd = ValidateCommand()

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None

        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            # argparse exits 0 for --help and 2 for usage errors
            return EXIT_SUCCESS if e.code in (0, None) else EXIT_INVALID_USAGE

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)

        if command == "validate":
            return self.validate_cmd.execute(args)

        handlers = {
            "plan": self.plan_cmd,
            "lint": self.lint_cmd,
            "locate": self.locate_cmd,
            "status": self.status_cmd,
        }
        handler = handlers.get(command) if command else None
        if handler is None:
            # No command specified - show help
            self.parser.print_help()
            return EXIT_SUCCESS

        config = self._load_config(args)
        if config is None:
            return EXIT_INVALID_USAGE
        return handler.execute(args, config)

    def _load_config(self, args: Namespace) -> Optional[PrelintConfig]:
        """Load configuration for the package directory named by args.

        Returns:
            Loaded config, or None if it could not be loaded.
        """
        project_root = Path(getattr(args, "path", ".")).resolve()
        if not project_root.is_dir():
            LOGGER.error(f"Not a directory: {project_root}")
            return None

        try:
            return load_config(
                project_root=project_root,
                cli_config_path=getattr(args, "config_file", None),
                cli_overrides=ConfigBridge.args_to_overrides(args),
            )
        except ConfigError as e:
            LOGGER.error(str(e))
            return None
