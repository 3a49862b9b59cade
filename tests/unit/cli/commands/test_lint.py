"""Tests for the lint command."""

from __future__ import annotations

import subprocess
from argparse import Namespace
from pathlib import Path
from unittest.mock import patch

import pytest

from prelint.cli.commands.lint import LintCommand
from prelint.cli.exit_codes import EXIT_PLUGIN_ERROR, EXIT_SUCCESS
from prelint.config.models import PrelintConfig, ToolConfig
from prelint.errors import ToolNotFoundError, UnknownToolError


def make_args(path: Path, work: Path) -> Namespace:
    return Namespace(path=str(path), target=None, sources=None, work_dir=work)


@pytest.fixture
def fake_lint(tmp_path: Path) -> Path:
    """An executable that records its arguments and fails when asked to."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "fakelint"
    script.write_text(
        "#!/bin/sh\n"
        "echo \"$@\" > \"$(dirname \"$0\")/args.txt\"\n"
        "exit \"${FAKELINT_EXIT:-0}\"\n"
    )
    script.chmod(0o755)
    return script


class TestLintCommand:
    """Tests for LintCommand."""

    def test_name(self) -> None:
        assert LintCommand().name == "lint"

    def test_runs_tool_from_search_path(self, package_dir: Path, tmp_path: Path, fake_lint: Path) -> None:
        config = PrelintConfig(tool=ToolConfig(name="fakelint", search_paths=[str(fake_lint.parent)]))
        work = tmp_path / "work"

        code = LintCommand().execute(make_args(package_dir, work), config)

        assert code == EXIT_SUCCESS
        recorded = (fake_lint.parent / "args.txt").read_text().split()
        assert recorded[:5] == ["lint", "--quiet", "--force-exclude", "--cache-path", str(work)]
        assert (work / "Output").is_dir()

    def test_propagates_tool_exit_code(
        self, package_dir: Path, tmp_path: Path, fake_lint: Path, monkeypatch
    ) -> None:
        monkeypatch.setenv("FAKELINT_EXIT", "2")
        config = PrelintConfig(tool=ToolConfig(name="fakelint", search_paths=[str(fake_lint.parent)]))

        assert LintCommand().execute(make_args(package_dir, tmp_path / "w"), config) == 2

    def test_missing_tool_does_not_fail(self, package_dir: Path, tmp_path: Path) -> None:
        with patch("prelint.locator.locate_tool", side_effect=ToolNotFoundError()):
            code = LintCommand().execute(make_args(package_dir, tmp_path / "w"), PrelintConfig())
        assert code == EXIT_SUCCESS

    def test_unknown_failure(self, package_dir: Path, tmp_path: Path) -> None:
        with patch("prelint.locator.locate_tool", side_effect=UnknownToolError("boom")):
            code = LintCommand().execute(make_args(package_dir, tmp_path / "w"), PrelintConfig())
        assert code == EXIT_PLUGIN_ERROR

    def test_nothing_to_lint_does_not_run(self, tmp_path: Path) -> None:
        empty = tmp_path / "Empty"
        empty.mkdir()
        with patch("prelint.locator.locate_tool", return_value=Path("/x/swiftlint")):
            with patch("prelint.cli.commands.lint.execute") as execute:
                code = LintCommand().execute(make_args(empty, tmp_path / "w"), PrelintConfig())
        assert code == EXIT_SUCCESS
        execute.assert_not_called()

    def test_timeout(self, package_dir: Path, tmp_path: Path) -> None:
        config = PrelintConfig(timeout=1)
        timeout = subprocess.TimeoutExpired(cmd="swiftlint", timeout=1)
        with patch("prelint.locator.locate_tool", return_value=Path("/x/swiftlint")):
            with patch("prelint.cli.commands.lint.execute", side_effect=timeout):
                code = LintCommand().execute(make_args(package_dir, tmp_path / "w"), config)
        assert code == EXIT_PLUGIN_ERROR
