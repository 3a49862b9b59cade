"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prelint.config.models import PrelintConfig


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier.

        Returns:
            String name of the command.
        """

    @abstractmethod
    def execute(self, args: Namespace, config: "PrelintConfig | None" = None) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Optional prelint configuration.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# ruff: noqa: E402
from prelint.cli.commands.lint import LintCommand
from prelint.cli.commands.locate import LocateCommand
from prelint.cli.commands.plan import PlanCommand
from prelint.cli.commands.status import StatusCommand
from prelint.cli.commands.validate import ValidateCommand

__all__ = [
    "Command",
    "LintCommand",
    "LocateCommand",
    "PlanCommand",
    "StatusCommand",
    "ValidateCommand",
]
