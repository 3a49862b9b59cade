"""SwiftLint build-tool plugin.

Entry points for package targets and Xcode project targets. Both resolve
the SwiftLint executable, pick the target's Swift sources, and return at
most one pre-build command.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Set

from prelint.commands import create_build_commands
from prelint.config.models import PrelintConfig
from prelint.core.logging import get_logger
from prelint.core.models import (
    Diagnostic,
    DiagnosticSeverity,
    FileType,
    PluginContext,
    PluginResult,
    SourceModuleTarget,
    Target,
    XcodeTarget,
)
from prelint.errors import ToolNotFoundError, UnknownToolError
from prelint.locator import ToolLocator

LOGGER = get_logger(__name__)

NOT_INSTALLED_MESSAGE = (
    "SwiftLint not installed, download from https://github.com/realm/SwiftLint"
)


class SwiftLintPlugin:
    """Registers SwiftLint as a pre-build command for eligible targets."""

    def __init__(
        self,
        config: Optional[PrelintConfig] = None,
        locator: Optional[ToolLocator] = None,
    ) -> None:
        self._config = config or PrelintConfig()
        self._locator = locator or ToolLocator(self._config.tool)

    @property
    def config(self) -> PrelintConfig:
        return self._config

    def create_build_commands(
        self,
        context: PluginContext,
        target: Target,
    ) -> PluginResult:
        """Plan the pre-build command for a package target.

        Targets without sources (binary, system library) are skipped.
        """
        if not isinstance(target, SourceModuleTarget):
            LOGGER.debug(f"Skipping {target.name}: not a source module target")
            return PluginResult()

        input_files = target.source_files_with_suffix(*self._config.source_suffixes)

        return self._plan(
            input_files=input_files,
            package_directory=context.package_directory,
            working_directory=context.plugin_work_directory,
        )

    def create_xcode_build_commands(
        self,
        context: PluginContext,
        target: XcodeTarget,
    ) -> PluginResult:
        """Plan the pre-build command for an Xcode project target.

        The context's package directory is the Xcode project directory.
        """
        suffixes = self._suffixes()
        input_files = [
            f.path for f in target.input_files
            if f.type == FileType.SOURCE and f.path.suffix in suffixes
        ]
        return self._plan(
            input_files=input_files,
            package_directory=context.package_directory,
            working_directory=context.plugin_work_directory,
        )

    def _suffixes(self) -> Set[str]:
        return {"." + s.lstrip(".") for s in self._config.source_suffixes}

    def _plan(
        self,
        input_files: List[Path],
        package_directory: Path,
        working_directory: Path,
    ) -> PluginResult:
        """Resolve the tool and build commands, mapping lookup failures to diagnostics.

        Any exception other than the two lookup failures propagates.
        """
        try:
            commands = create_build_commands(
                input_files=input_files,
                package_directory=package_directory,
                working_directory=working_directory,
                tool=self._locator.locate(),
                configuration_files=self._config.configuration_files,
            )
        except ToolNotFoundError:
            diagnostic = Diagnostic.warning(NOT_INSTALLED_MESSAGE)
        except UnknownToolError as e:
            diagnostic = Diagnostic.error(e.output)
        else:
            return PluginResult(commands=commands)

        _log_diagnostic(diagnostic)
        return PluginResult(diagnostics=[diagnostic])


def _log_diagnostic(diagnostic: Diagnostic) -> None:
    if diagnostic.severity == DiagnosticSeverity.ERROR:
        LOGGER.error(diagnostic.message)
    else:
        LOGGER.warning(diagnostic.message)
