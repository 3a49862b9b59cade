"""Shared fixtures for unit tests."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory):
    """Point PRELINT_HOME at an empty directory so no global config leaks in."""
    home = tmp_path_factory.mktemp("prelint-home")
    with patch.dict(os.environ, {"PRELINT_HOME": str(home)}):
        yield home


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """A minimal Swift package layout."""
    package = tmp_path / "MyPackage"
    sources = package / "Sources" / "App"
    sources.mkdir(parents=True)
    (sources / "main.swift").write_text("print(\"hi\")\n")
    (sources / "Model.swift").write_text("struct Model {}\n")
    (sources / "notes.md").write_text("# notes\n")
    (package / "Package.swift").write_text("// swift-tools-version:5.9\n")
    return package
