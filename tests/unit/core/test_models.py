"""Tests for plugin boundary models."""

from __future__ import annotations

from pathlib import Path

from prelint.core.models import (
    Diagnostic,
    DiagnosticSeverity,
    PluginResult,
    PrebuildCommand,
    SourceModuleTarget,
)


class TestSourceModuleTarget:
    """Tests for SourceModuleTarget."""

    def test_source_files_with_suffix(self) -> None:
        target = SourceModuleTarget(
            name="App",
            source_files=[Path("a.swift"), Path("b.m"), Path("c.swift"), Path("swift")],
        )
        assert target.source_files_with_suffix("swift") == [Path("a.swift"), Path("c.swift")]
        assert target.source_files_with_suffix(".m") == [Path("b.m")]

    def test_multiple_suffixes_keep_target_order(self) -> None:
        target = SourceModuleTarget(
            name="Mixed",
            source_files=[Path("b.m"), Path("a.swift"), Path("c.h"), Path("d.m")],
        )
        assert target.source_files_with_suffix("swift", ".m") == [
            Path("b.m"), Path("a.swift"), Path("d.m"),
        ]


class TestPrebuildCommand:
    """Tests for PrebuildCommand."""

    def test_to_argv(self) -> None:
        command = PrebuildCommand(
            display_name="SwiftLint",
            executable=Path("/bin/swiftlint"),
            arguments=["lint", "--quiet"],
            output_files_directory=Path("/work/Output"),
        )
        assert command.to_argv() == ["/bin/swiftlint", "lint", "--quiet"]

    def test_to_dict(self) -> None:
        command = PrebuildCommand(
            display_name="SwiftLint",
            executable=Path("/bin/swiftlint"),
            arguments=["lint"],
            output_files_directory=Path("/work/Output"),
        )
        data = command.to_dict()
        assert data["executable"] == "/bin/swiftlint"
        assert data["output_files_directory"] == "/work/Output"
        assert data["environment"] == {}


class TestPluginResult:
    """Tests for PluginResult."""

    def test_warning_is_not_error(self) -> None:
        result = PluginResult(diagnostics=[Diagnostic.warning("careful")])
        assert not result.has_errors

    def test_error(self) -> None:
        result = PluginResult(diagnostics=[Diagnostic.error("boom")])
        assert result.has_errors
        assert result.diagnostics[0].severity == DiagnosticSeverity.ERROR

    def test_to_dict_includes_target(self) -> None:
        data = PluginResult(diagnostics=[Diagnostic.warning("w")]).to_dict(target="App")
        assert data == {
            "commands": [],
            "diagnostics": [{"severity": "warning", "message": "w"}],
            "target": "App",
        }
