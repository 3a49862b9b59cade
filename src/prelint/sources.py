"""Collecting a package's source files for the standalone host."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from prelint.bootstrap.paths import PrelintPaths, get_prelint_home
from prelint.config.ignore import IgnorePatterns, load_ignore_patterns
from prelint.config.models import DEFAULT_IGNORE, PrelintConfig
from prelint.core.logging import get_logger
from prelint.core.models import PluginContext, SourceModuleTarget

LOGGER = get_logger(__name__)


def collect_source_files(
    root: Path,
    suffixes: Iterable[str],
    ignore: Optional[IgnorePatterns] = None,
    ignore_root: Optional[Path] = None,
) -> Iterator[Path]:
    """Yield absolute paths of files under root with a matching suffix, sorted.

    Ignored directories are not descended into.

    Args:
        root: Directory to walk.
        suffixes: Extensions with or without the leading dot.
        ignore: Patterns for files and directories to skip.
        ignore_root: Directory the patterns are relative to (default: root).
    """
    root = Path(root).resolve()
    ignore_root = Path(ignore_root).resolve() if ignore_root else root
    wanted = {"." + s.lstrip(".") for s in suffixes}
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        dirnames[:] = sorted(
            d for d in dirnames
            if ignore is None or not ignore.matches(current / d, ignore_root)
        )
        for filename in sorted(filenames):
            path = current / filename
            if path.suffix not in wanted:
                continue
            if ignore is not None and ignore.matches(path, ignore_root):
                continue
            yield path


def build_target(
    package_directory: Path,
    config: PrelintConfig,
    name: Optional[str] = None,
    source_directory: Optional[Path] = None,
) -> SourceModuleTarget:
    """Build a source target from a directory tree.

    Args:
        package_directory: Package root; ignore patterns are relative to it.
        config: Loaded configuration.
        name: Target name (default: the source directory's name).
        source_directory: Directory to collect from (default: package_directory).

    Returns:
        SourceModuleTarget with the collected files.
    """
    source_directory = source_directory or package_directory
    ignore = load_ignore_patterns(package_directory, config.ignore, defaults=DEFAULT_IGNORE)
    LOGGER.debug(f"Ignore patterns from {ignore.source}")
    files: List[Path] = list(
        collect_source_files(
            source_directory, config.source_suffixes, ignore, ignore_root=package_directory
        )
    )
    target_name = name or source_directory.resolve().name
    LOGGER.info(f"Collected {len(files)} source file(s) for target {target_name}")
    return SourceModuleTarget(name=target_name, source_files=files)


def build_context(
    package_directory: Path,
    target_name: str,
    work_directory: Optional[Path] = None,
) -> PluginContext:
    """Create the context a host would pass to the plugin.

    Without an explicit work directory, one is allocated under the
    prelint home directory.
    """
    if work_directory is None:
        work_directory = PrelintPaths(get_prelint_home()).plugin_work_dir(
            package_directory, target_name
        )
    return PluginContext(
        package_directory=package_directory.resolve(),
        plugin_work_directory=work_directory,
    )
