"""Tests for path management functionality."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from prelint.bootstrap.paths import (
    DEFAULT_HOME_DIR_NAME,
    PrelintPaths,
    get_prelint_home,
)


class TestGetPrelintHome:
    """Tests for get_prelint_home function."""

    def test_returns_default_in_user_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"HOME": str(tmp_path), "PRELINT_HOME": ""}):
            home = get_prelint_home()
        assert home == tmp_path / DEFAULT_HOME_DIR_NAME

    def test_respects_prelint_home_env_var(self, tmp_path: Path) -> None:
        custom_home = tmp_path / "custom-prelint"
        with patch.dict(os.environ, {"PRELINT_HOME": str(custom_home)}):
            assert get_prelint_home() == custom_home


class TestPrelintPaths:
    """Tests for PrelintPaths class."""

    def test_paths_from_home(self, tmp_path: Path) -> None:
        paths = PrelintPaths(tmp_path)
        assert paths.config_dir == tmp_path / "config"
        assert paths.work_dir == tmp_path / "work"

    def test_plugin_work_dir_layout(self, tmp_path: Path) -> None:
        paths = PrelintPaths(tmp_path / "home")
        package = tmp_path / "MyPackage"
        package.mkdir()

        work = paths.plugin_work_dir(package, "App")

        assert work.name == "App"
        assert work.parent.parent == paths.work_dir
        assert work.parent.name.startswith("MyPackage-")

    def test_plugin_work_dir_is_stable(self, tmp_path: Path) -> None:
        paths = PrelintPaths(tmp_path)
        assert paths.plugin_work_dir(tmp_path / "a", "T") == paths.plugin_work_dir(tmp_path / "a", "T")

    def test_same_name_different_packages(self, tmp_path: Path) -> None:
        paths = PrelintPaths(tmp_path)
        first = paths.plugin_work_dir(tmp_path / "one" / "Pkg", "T")
        second = paths.plugin_work_dir(tmp_path / "two" / "Pkg", "T")
        assert first != second

