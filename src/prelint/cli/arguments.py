"""Argument parser construction for prelint CLI.

This module builds the argument parser with subcommands:
- prelint plan     - Show the pre-build commands for a package
- prelint lint     - Plan and run the pre-build commands
- prelint locate   - Print the resolved SwiftLint path
- prelint status   - Show tool and configuration status
- prelint validate - Validate a prelint configuration file
"""

from __future__ import annotations

import argparse
from pathlib import Path

from prelint.config.models import VALID_LOCATORS


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show prelint version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _add_config_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by commands that load configuration."""
    group = parser.add_argument_group("configuration")
    group.add_argument(
        "--config-file",
        type=Path,
        metavar="PATH",
        help="Use this prelint config instead of .prelint.yml.",
    )
    group.add_argument(
        "--tool",
        metavar="NAME",
        help="Lint executable name (default: swiftlint).",
    )
    group.add_argument(
        "--search-path",
        action="append",
        metavar="DIR",
        help="Directory searched before PATH. May be repeated.",
    )
    group.add_argument(
        "--locator",
        choices=list(VALID_LOCATORS),
        help="How to find the tool (default: which).",
    )


def _add_target_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Package directory (default: current directory).",
    )
    parser.add_argument(
        "--target",
        metavar="NAME",
        help="Target name (default: package directory name).",
    )
    parser.add_argument(
        "--sources",
        type=Path,
        metavar="DIR",
        help="Collect sources from this directory instead of the package root.",
    )
    parser.add_argument(
        "--work-dir",
        type=Path,
        metavar="DIR",
        help="Plugin work directory (default: under ~/.prelint/work/).",
    )


def _build_plan_parser(subparsers: argparse._SubParsersAction) -> None:
    plan_parser = subparsers.add_parser(
        "plan",
        help="Show the pre-build commands for a package.",
        description="Locate SwiftLint, discover its configuration and print the planned command.",
    )
    _add_target_options(plan_parser)
    _add_config_options(plan_parser)
    plan_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )


def _build_lint_parser(subparsers: argparse._SubParsersAction) -> None:
    lint_parser = subparsers.add_parser(
        "lint",
        help="Plan and run the pre-build commands.",
        description="Run SwiftLint over the package sources as a build system would.",
    )
    _add_target_options(lint_parser)
    _add_config_options(lint_parser)
    lint_parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Abort the lint run after this many seconds.",
    )


def _build_locate_parser(subparsers: argparse._SubParsersAction) -> None:
    locate_parser = subparsers.add_parser(
        "locate",
        help="Print the resolved SwiftLint path.",
    )
    locate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Package directory used to load configuration (default: current directory).",
    )
    _add_config_options(locate_parser)


def _build_status_parser(subparsers: argparse._SubParsersAction) -> None:
    status_parser = subparsers.add_parser(
        "status",
        help="Show tool and configuration status.",
    )
    status_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Package directory (default: current directory).",
    )
    _add_config_options(status_parser)


def _build_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a prelint configuration file.",
    )
    validate_parser.add_argument(
        "--config-file",
        type=Path,
        metavar="PATH",
        help="Config file to validate (default: .prelint.yml in the current directory).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the complete argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="prelint",
        description="prelint - run SwiftLint as a pre-build step.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        metavar="<command>",
    )
    _build_plan_parser(subparsers)
    _build_lint_parser(subparsers)
    _build_locate_parser(subparsers)
    _build_status_parser(subparsers)
    _build_validate_parser(subparsers)

    return parser
