"""Running planned pre-build commands.

A host build system normally runs the commands itself; this module does
it for the standalone CLI. Commands run one at a time, synchronously.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Iterable, Optional, Union

from prelint.core.logging import get_logger
from prelint.core.models import PrebuildCommand
from prelint.core.subprocess_runner import run_command

LOGGER = get_logger(__name__)


def run_prebuild_command(
    command: PrebuildCommand,
    cwd: Union[str, Path],
    timeout: Optional[float] = None,
    capture_output: bool = False,
) -> subprocess.CompletedProcess:
    """Run a single pre-build command.

    The declared output directory is created first, as a host would.

    Args:
        command: Command to run.
        cwd: Working directory for the tool.
        timeout: Timeout in seconds, or None to wait indefinitely.
        capture_output: Capture output instead of inheriting the terminal.

    Returns:
        CompletedProcess of the tool.

    Raises:
        subprocess.TimeoutExpired: If the command times out.
        OSError: If the executable cannot be started.
    """
    command.output_files_directory.mkdir(parents=True, exist_ok=True)

    LOGGER.info(f"Running {command.display_name}")
    LOGGER.debug(f"Running: {' '.join(command.to_argv())}")

    result = run_command(
        command.to_argv(),
        cwd=cwd,
        timeout=timeout,
        capture_output=capture_output,
        env=command.environment or None,
    )
    if result.returncode != 0:
        LOGGER.info(f"{command.display_name} exited with code {result.returncode}")
    return result


def execute(
    commands: Iterable[PrebuildCommand],
    cwd: Union[str, Path],
    timeout: Optional[float] = None,
) -> int:
    """Run commands in order and return the highest exit code (0 if none ran)."""
    exit_code = 0
    for command in commands:
        result = run_prebuild_command(command, cwd=cwd, timeout=timeout)
        exit_code = max(exit_code, result.returncode)
    return exit_code
