"""Bridge between CLI arguments and configuration overrides."""

from __future__ import annotations

from argparse import Namespace
from typing import Any, Dict


class ConfigBridge:
    """Converts CLI arguments to configuration overrides."""

    @staticmethod
    def args_to_overrides(args: Namespace) -> Dict[str, Any]:
        """Convert CLI arguments to config override dict.

        Only flags the user actually passed produce overrides.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Dictionary of config overrides.
        """
        overrides: Dict[str, Any] = {}
        tool: Dict[str, Any] = {}

        if getattr(args, "tool", None):
            tool["name"] = args.tool
        if getattr(args, "search_path", None):
            tool["search_paths"] = list(args.search_path)
        if getattr(args, "locator", None):
            tool["locator"] = args.locator
        if tool:
            overrides["tool"] = tool

        if getattr(args, "timeout", None) is not None:
            overrides["timeout"] = args.timeout

        return overrides
