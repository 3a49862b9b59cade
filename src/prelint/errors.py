"""Exceptions raised by the SwiftLint plugin."""

from __future__ import annotations


class PrelintPluginError(Exception):
    """Base class for plugin failures reported to the host."""


class ToolNotFoundError(PrelintPluginError):
    """The lint executable is not installed on this host.

    Non-fatal: the host gets a warning and the build proceeds unlinted.
    """

    def __init__(self, tool_name: str = "swiftlint") -> None:
        self.tool_name = tool_name
        super().__init__(f"{tool_name} not found")


class UnknownToolError(PrelintPluginError):
    """The tool lookup failed for a reason other than a missing tool."""

    def __init__(self, output: str) -> None:
        self.output = output
        super().__init__(output)
