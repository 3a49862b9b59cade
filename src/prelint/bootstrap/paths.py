"""Path management for the prelint home directory.

Handles the ~/.prelint directory structure. When no host build system
provides a plugin work directory, each target gets its own cache
directory under ~/.prelint/work/.
"""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".prelint"

# Environment variable to override home directory
PRELINT_HOME_ENV = "PRELINT_HOME"


def get_prelint_home() -> Path:
    """Get the prelint home directory path.

    Resolution order:
    1. PRELINT_HOME environment variable (if set)
    2. ~/.prelint (default)

    Returns:
        Path to the prelint home directory.
    """
    env_home = os.environ.get(PRELINT_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME


@dataclass
class PrelintPaths:
    """Manages paths within the prelint home directory.

    Directory structure:
        ~/.prelint/
            config/                       - Global configuration
            work/{package-key}/{target}/  - Per-target lint cache
    """

    home: Path

    _CONFIG_DIR: ClassVar[str] = "config"
    _WORK_DIR: ClassVar[str] = "work"

    @property
    def config_dir(self) -> Path:
        return self.home / self._CONFIG_DIR

    @property
    def work_dir(self) -> Path:
        return self.home / self._WORK_DIR

    def plugin_work_dir(self, package_directory: Path, target_name: str) -> Path:
        """Work directory for one target of one package.

        Packages are keyed by a short hash of their resolved path so two
        checkouts with the same directory name never share a cache.

        Args:
            package_directory: Root directory of the package.
            target_name: Name of the target being linted.

        Returns:
            Path to the target's work directory (not created).
        """
        resolved = str(Path(package_directory).resolve())
        key = hashlib.sha256(resolved.encode()).hexdigest()[:12]
        return self.work_dir / f"{Path(resolved).name}-{key}" / target_name
