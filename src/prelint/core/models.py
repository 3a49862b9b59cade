"""Plugin boundary models.

These types describe what a host build system hands to the plugin
(context and target) and what the plugin hands back (pre-build commands
and diagnostics).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


class DiagnosticSeverity(str, Enum):
    """Severity of a diagnostic reported to the host."""

    WARNING = "warning"
    ERROR = "error"


class FileType(str, Enum):
    """Kind of an Xcode target input file."""

    SOURCE = "source"
    HEADER = "header"
    RESOURCE = "resource"
    UNKNOWN = "unknown"


@dataclass
class PluginContext:
    """Paths the host provides to the plugin."""

    package_directory: Path
    plugin_work_directory: Path


@dataclass
class Target:
    """A build target without compilable sources (binary, system library)."""

    name: str


@dataclass
class SourceModuleTarget(Target):
    """A package target that compiles source files."""

    source_files: List[Path] = field(default_factory=list)

    def source_files_with_suffix(self, *suffixes: str) -> List[Path]:
        """Return source files whose extension matches any of suffixes.

        Args:
            suffixes: Extensions with or without the leading dot (e.g. 'swift').

        Returns:
            Matching files, in target order.
        """
        wanted = {"." + suffix.lstrip(".") for suffix in suffixes}
        return [path for path in self.source_files if path.suffix in wanted]


@dataclass
class InputFile:
    """A single Xcode target input file."""

    path: Path
    type: FileType = FileType.SOURCE


@dataclass
class XcodeTarget:
    """An Xcode project target."""

    name: str
    input_files: List[InputFile] = field(default_factory=list)


@dataclass
class PrebuildCommand:
    """An out-of-process command the host runs before compiling a target."""

    display_name: str
    executable: Path
    arguments: List[str]
    output_files_directory: Path
    environment: Dict[str, str] = field(default_factory=dict)

    def to_argv(self) -> List[str]:
        """Full argument vector including the executable."""
        return [str(self.executable), *self.arguments]

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "display_name": self.display_name,
            "executable": str(self.executable),
            "arguments": list(self.arguments),
            "output_files_directory": str(self.output_files_directory),
            "environment": dict(self.environment),
        }


@dataclass
class Diagnostic:
    """A warning or error surfaced to the host build log."""

    severity: DiagnosticSeverity
    message: str

    @classmethod
    def warning(cls, message: str) -> "Diagnostic":
        return cls(DiagnosticSeverity.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "Diagnostic":
        return cls(DiagnosticSeverity.ERROR, message)

    def to_dict(self) -> Dict[str, str]:
        return {"severity": self.severity.value, "message": self.message}


@dataclass
class PluginResult:
    """Commands and diagnostics produced for one target."""

    commands: List[PrebuildCommand] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self.diagnostics)

    def to_dict(self, target: Optional[str] = None) -> Dict[str, object]:
        data: Dict[str, object] = {
            "commands": [c.to_dict() for c in self.commands],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
        if target is not None:
            data["target"] = target
        return data
