"""Command line interface for prelint."""

from __future__ import annotations

import sys
from typing import Iterable, Optional


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entry point."""
    from prelint.cli.runner import CLIRunner

    return CLIRunner().run(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
