"""Plan command implementation."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from prelint.config.models import PrelintConfig

from prelint.cli.commands import Command
from prelint.cli.exit_codes import EXIT_PLUGIN_ERROR, EXIT_SUCCESS
from prelint.config.loader import get_default_config
from prelint.core.models import PluginResult, SourceModuleTarget
from prelint.plugin import SwiftLintPlugin
from prelint.sources import build_context, build_target


def plan_package(args: Namespace, config: "PrelintConfig") -> Tuple[SourceModuleTarget, PluginResult]:
    """Collect a package's sources and ask the plugin for its commands.

    Args:
        args: Parsed arguments with path, target, sources and work_dir.
        config: Loaded configuration.

    Returns:
        Tuple of (target, plugin result).
    """
    package_directory = Path(args.path).resolve()
    source_directory = getattr(args, "sources", None)
    if source_directory is not None:
        source_directory = Path(source_directory).resolve()

    target = build_target(
        package_directory,
        config,
        name=getattr(args, "target", None),
        source_directory=source_directory,
    )
    context = build_context(
        package_directory,
        target.name,
        work_directory=getattr(args, "work_dir", None),
    )
    result = SwiftLintPlugin(config).create_build_commands(context, target)
    return target, result


class PlanCommand(Command):
    """Prints the pre-build commands planned for a package."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "plan"

    def execute(self, args: Namespace, config: "PrelintConfig | None" = None) -> int:
        """Execute the plan command.

        Args:
            args: Parsed command-line arguments.
            config: prelint configuration.

        Returns:
            Exit code: 0 on success or warning, 2 on plugin error.
        """
        config = config or get_default_config()
        target, result = plan_package(args, config)

        if getattr(args, "format", "text") == "json":
            print(json.dumps(result.to_dict(target=target.name), indent=2))
        else:
            self._print_text(target, result)

        return EXIT_PLUGIN_ERROR if result.has_errors else EXIT_SUCCESS

    def _print_text(self, target: SourceModuleTarget, result: PluginResult) -> None:
        print(f"Target: {target.name} ({len(target.source_files)} source file(s))")
        for diagnostic in result.diagnostics:
            print(f"{diagnostic.severity.value}: {diagnostic.message}")
        if not result.commands and not result.diagnostics:
            print("Nothing to lint.")
        for command in result.commands:
            print(f"{command.display_name}:")
            print(f"  executable: {command.executable}")
            print(f"  arguments: {' '.join(command.arguments)}")
            print(f"  output directory: {command.output_files_directory}")
