"""Tests for configuration discovery."""

from __future__ import annotations

from pathlib import Path

from prelint.discovery import (
    candidate_directories,
    first_configuration_file_in_parent_directories,
)


class TestCandidateDirectories:
    """Tests for candidate_directories."""

    def test_starts_with_start_directory(self, tmp_path: Path) -> None:
        dirs = list(candidate_directories(tmp_path))
        assert dirs[0] == tmp_path

    def test_walks_upwards(self, tmp_path: Path) -> None:
        nested = tmp_path / "a" / "b"
        dirs = list(candidate_directories(nested))
        assert dirs[:3] == [nested, tmp_path / "a", tmp_path]

    def test_excludes_filesystem_root(self, tmp_path: Path) -> None:
        dirs = list(candidate_directories(tmp_path))
        assert Path(tmp_path.anchor) not in dirs


class TestFirstConfigurationFile:
    """Tests for first_configuration_file_in_parent_directories."""

    def test_none_when_missing(self, tmp_path: Path) -> None:
        assert first_configuration_file_in_parent_directories(tmp_path, ["no-such.yml"]) is None

    def test_finds_in_start_directory(self, tmp_path: Path) -> None:
        config = tmp_path / ".swiftlint.yml"
        config.write_text("")
        assert first_configuration_file_in_parent_directories(tmp_path) == config

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / ".swiftlint.yml").write_text("")
        nested = tmp_path / "pkg"
        nested.mkdir()
        inner = nested / ".swiftlint.yml"
        inner.write_text("")

        assert first_configuration_file_in_parent_directories(nested) == inner

    def test_finds_in_ancestor(self, tmp_path: Path) -> None:
        config = tmp_path / ".swiftlint.yml"
        config.write_text("")
        nested = tmp_path / "a" / "b" / "c"
        nested.mkdir(parents=True)

        assert first_configuration_file_in_parent_directories(nested) == config

    def test_directory_with_config_name_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "cfg.yml").mkdir()
        assert first_configuration_file_in_parent_directories(tmp_path, ["cfg.yml"]) is None

    def test_name_order_within_directory(self, tmp_path: Path) -> None:
        (tmp_path / "first.yml").write_text("")
        (tmp_path / "second.yml").write_text("")
        found = first_configuration_file_in_parent_directories(
            tmp_path, ["second.yml", "first.yml"]
        )
        assert found == tmp_path / "second.yml"
