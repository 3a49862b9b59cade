"""Gitignore-style pattern parsing and matching.

Decides which files under a package directory belong to a target when
prelint collects sources itself. Patterns come from:
- .prelintignore file (gitignore syntax)
- config.ignore list (gitignore syntax)

SwiftLint's own excluded paths still apply through --force-exclude;
these patterns only keep build products and vendored trees out of the
file list.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pathspec

from prelint.core.logging import get_logger

LOGGER = get_logger(__name__)

PRELINTIGNORE_NAMES = [".prelintignore"]


class IgnorePatterns:
    """Manages ignore patterns from multiple sources."""

    def __init__(
        self,
        patterns: List[str],
        source: str = "config",
    ) -> None:
        """Initialize with a list of gitignore-style patterns.

        Args:
            patterns: List of gitignore-style patterns.
            source: Source description for logging.
        """
        self._source = source
        self._raw_patterns = patterns

        clean_patterns = [
            p for p in patterns if p.strip() and not p.strip().startswith("#")
        ]

        self._spec = pathspec.PathSpec.from_lines(
            pathspec.patterns.GitWildMatchPattern,
            clean_patterns,
        )

        if clean_patterns:
            LOGGER.debug(f"Loaded {len(clean_patterns)} ignore patterns from {source}")

    @property
    def source(self) -> str:
        return self._source

    def matches(self, path: Path, root: Path) -> bool:
        """Check if a path matches any ignore pattern.

        Args:
            path: Path to check (absolute or relative).
            root: Package root for relative path calculation.

        Returns:
            True if path should be ignored, False otherwise.
        """
        full_path = path if path.is_absolute() else root / path
        try:
            rel_path = full_path.resolve().relative_to(root.resolve())
        except ValueError:
            rel_path = path

        # pathspec expects forward-slash paths; directory patterns need the slash
        rel_str = rel_path.as_posix()
        if full_path.is_dir():
            rel_str += "/"
        return self._spec.match_file(rel_str)

    @classmethod
    def from_file(cls, file_path: Path) -> Optional["IgnorePatterns"]:
        """Load patterns from a file.

        Args:
            file_path: Path to ignore file.

        Returns:
            IgnorePatterns instance, or None if file doesn't exist.
        """
        if not file_path.exists():
            return None

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            LOGGER.warning(f"Failed to load ignore file {file_path}: {e}")
            return None
        return cls(content.splitlines(), source=str(file_path))

    @classmethod
    def merge(cls, *pattern_sets: Optional["IgnorePatterns"]) -> "IgnorePatterns":
        """Merge multiple IgnorePatterns instances.

        Args:
            pattern_sets: IgnorePatterns instances to merge.

        Returns:
            New IgnorePatterns with combined patterns.
        """
        all_patterns: List[str] = []
        sources: List[str] = []

        for ps in pattern_sets:
            if ps is not None:
                all_patterns.extend(ps._raw_patterns)
                sources.append(ps._source)

        return cls(all_patterns, source="+".join(sources) if sources else "empty")


def find_prelintignore(project_root: Path) -> Optional[Path]:
    """Find .prelintignore file in the package directory."""
    for name in PRELINTIGNORE_NAMES:
        ignore_path = project_root / name
        if ignore_path.exists():
            return ignore_path
    return None


def load_ignore_patterns(
    project_root: Path,
    config_patterns: List[str],
    defaults: Optional[List[str]] = None,
) -> IgnorePatterns:
    """Load and merge ignore patterns from all sources.

    Loads patterns from:
    1. Built-in defaults (build products)
    2. .prelintignore file (if present)
    3. config.ignore list from .prelint.yml

    Later sources may re-include paths with '!' negation.

    Args:
        project_root: Package directory.
        config_patterns: Patterns from config.ignore.
        defaults: Built-in patterns applied first.

    Returns:
        Merged IgnorePatterns instance.
    """
    default_ignore = IgnorePatterns(defaults, source="defaults") if defaults else None

    ignore_file = find_prelintignore(project_root)
    file_patterns = IgnorePatterns.from_file(ignore_file) if ignore_file else None

    config_ignore = (
        IgnorePatterns(config_patterns, source="config.ignore")
        if config_patterns
        else None
    )

    return IgnorePatterns.merge(default_ignore, file_patterns, config_ignore)
