"""SwiftLint configuration discovery.

The tool is not necessarily run from the package directory, so the
configuration file is looked up explicitly and passed with --config.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Sequence

from prelint.config.models import DEFAULT_CONFIGURATION_FILES
from prelint.core.logging import get_logger

LOGGER = get_logger(__name__)


def candidate_directories(start: Path) -> Iterator[Path]:
    """Yield start and each of its parents, stopping before the filesystem root."""
    directory = Path(start).absolute()
    while True:
        yield directory
        parent = directory.parent
        if parent == directory or parent == Path(parent.anchor):
            return
        directory = parent


def first_configuration_file_in_parent_directories(
    start: Path,
    names: Sequence[str] = tuple(DEFAULT_CONFIGURATION_FILES),
) -> Optional[Path]:
    """Find the nearest configuration file at or above start.

    Args:
        start: Directory to start from (usually the package directory).
        names: Recognised file names, in order of preference.

    Returns:
        Path to the first configuration file found, or None.
    """
    for directory in candidate_directories(start):
        for name in names:
            candidate = directory / name
            if candidate.is_file():
                LOGGER.debug(f"Found configuration file {candidate}")
                return candidate
    return None
