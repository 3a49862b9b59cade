"""Tests for the plan command."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from unittest.mock import patch

from prelint.cli.commands.plan import PlanCommand, plan_package
from prelint.cli.exit_codes import EXIT_PLUGIN_ERROR, EXIT_SUCCESS
from prelint.config.models import PrelintConfig
from prelint.errors import ToolNotFoundError, UnknownToolError

TOOL = Path("/opt/homebrew/bin/swiftlint")


def make_args(path: Path, work: Path, **kwargs) -> Namespace:
    defaults = {"path": str(path), "target": None, "sources": None, "work_dir": work, "format": "text"}
    defaults.update(kwargs)
    return Namespace(**defaults)


class TestPlanPackage:
    """Tests for plan_package."""

    def test_collects_sources_and_plans(self, package_dir: Path, tmp_path: Path) -> None:
        args = make_args(package_dir, tmp_path / "w")
        with patch("prelint.locator.locate_tool", return_value=TOOL):
            target, result = plan_package(args, PrelintConfig())

        assert target.name == "MyPackage"
        assert len(target.source_files) == 3
        assert result.commands[0].arguments[-3:] == [str(f) for f in target.source_files]

    def test_named_target_and_source_directory(self, package_dir: Path, tmp_path: Path) -> None:
        args = make_args(
            package_dir, tmp_path / "w", target="App", sources=package_dir / "Sources" / "App"
        )
        with patch("prelint.locator.locate_tool", return_value=TOOL):
            target, result = plan_package(args, PrelintConfig())

        assert target.name == "App"
        assert [f.name for f in target.source_files] == ["Model.swift", "main.swift"]

    def test_discovers_swiftlint_config(self, package_dir: Path, tmp_path: Path) -> None:
        config = package_dir / ".swiftlint.yml"
        config.write_text("opt_in_rules: []\n")
        args = make_args(package_dir, tmp_path / "w")
        with patch("prelint.locator.locate_tool", return_value=TOOL):
            _, result = plan_package(args, PrelintConfig())

        arguments = result.commands[0].arguments
        assert arguments[arguments.index("--config") + 1] == str(config)


class TestPlanCommand:
    """Tests for PlanCommand."""

    def test_name(self) -> None:
        assert PlanCommand().name == "plan"

    def test_text_output(self, package_dir: Path, tmp_path: Path, capsys) -> None:
        with patch("prelint.locator.locate_tool", return_value=TOOL):
            code = PlanCommand().execute(make_args(package_dir, tmp_path / "w"), PrelintConfig())

        out = capsys.readouterr().out
        assert code == EXIT_SUCCESS
        assert "Target: MyPackage (3 source file(s))" in out
        assert f"executable: {TOOL}" in out
        assert "--force-exclude" in out

    def test_json_output(self, package_dir: Path, tmp_path: Path, capsys) -> None:
        args = make_args(package_dir, tmp_path / "w", format="json")
        with patch("prelint.locator.locate_tool", return_value=TOOL):
            PlanCommand().execute(args, PrelintConfig())

        data = json.loads(capsys.readouterr().out)
        command = data["commands"][0]
        assert command["display_name"] == "SwiftLint"
        assert command["output_files_directory"] == str(tmp_path / "w" / "Output")
        assert data["diagnostics"] == []

    def test_nothing_to_lint(self, tmp_path: Path, capsys) -> None:
        empty = tmp_path / "Empty"
        empty.mkdir()
        with patch("prelint.locator.locate_tool", return_value=TOOL):
            code = PlanCommand().execute(make_args(empty, tmp_path / "w"), PrelintConfig())

        assert code == EXIT_SUCCESS
        assert "Nothing to lint." in capsys.readouterr().out

    def test_tool_not_found_is_warning(self, package_dir: Path, tmp_path: Path, capsys) -> None:
        with patch("prelint.locator.locate_tool", side_effect=ToolNotFoundError()):
            code = PlanCommand().execute(make_args(package_dir, tmp_path / "w"), PrelintConfig())

        assert code == EXIT_SUCCESS
        assert "warning: SwiftLint not installed" in capsys.readouterr().out

    def test_unknown_failure_is_error(self, package_dir: Path, tmp_path: Path, capsys) -> None:
        with patch("prelint.locator.locate_tool", side_effect=UnknownToolError("bad shell")):
            code = PlanCommand().execute(make_args(package_dir, tmp_path / "w"), PrelintConfig())

        assert code == EXIT_PLUGIN_ERROR
        assert "error: bad shell" in capsys.readouterr().out
