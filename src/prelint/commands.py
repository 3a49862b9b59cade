"""Pre-build command construction."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from prelint.config.models import DEFAULT_CONFIGURATION_FILES
from prelint.core.logging import get_logger
from prelint.core.models import PrebuildCommand
from prelint.discovery import first_configuration_file_in_parent_directories

LOGGER = get_logger(__name__)

DISPLAY_NAME = "SwiftLint"

# Declared so cache files under the work directory stay out of bundles.
OUTPUT_DIRECTORY_NAME = "Output"


def build_arguments(
    input_files: Sequence[Path],
    working_directory: Path,
    configuration: Optional[Path] = None,
) -> List[str]:
    """Assemble the ``swiftlint lint`` argument list.

    All files are passed explicitly, so the tool's own file discovery is
    bypassed and --force-exclude is needed for excluded paths to apply.
    """
    arguments = [
        "lint",
        "--quiet",
        "--force-exclude",
        "--cache-path", str(working_directory),
    ]
    if configuration is not None:
        arguments.extend(["--config", str(configuration)])
    arguments.extend(str(path) for path in input_files)
    return arguments


def create_build_commands(
    input_files: Sequence[Path],
    package_directory: Path,
    working_directory: Path,
    tool: Path,
    configuration_files: Sequence[str] = tuple(DEFAULT_CONFIGURATION_FILES),
) -> List[PrebuildCommand]:
    """Create the pre-build command for one target.

    Args:
        input_files: Source files to lint, in target order.
        package_directory: Directory where configuration discovery starts.
        working_directory: Plugin work directory, used as the lint cache.
        tool: Resolved path of the lint executable.
        configuration_files: Recognised configuration file names.

    Returns:
        An empty list when there is nothing to lint, otherwise exactly one
        PrebuildCommand.
    """
    if not input_files:
        LOGGER.debug("No source files in target, nothing to lint")
        return []

    configuration = first_configuration_file_in_parent_directories(
        package_directory, configuration_files
    )
    if configuration is None:
        LOGGER.debug(f"No configuration file found above {package_directory}")

    working_directory = Path(working_directory)
    return [
        PrebuildCommand(
            display_name=DISPLAY_NAME,
            executable=Path(tool),
            arguments=build_arguments(input_files, working_directory, configuration),
            output_files_directory=working_directory / OUTPUT_DIRECTORY_NAME,
        )
    ]
