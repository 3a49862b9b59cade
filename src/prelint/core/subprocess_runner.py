"""Subprocess helpers for running external tools."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Union


def run_command(
    cmd: List[str],
    cwd: Optional[Union[str, Path]] = None,
    timeout: Optional[float] = None,
    capture_output: bool = True,
    merge_stderr: bool = False,
    env: Optional[Dict[str, str]] = None,
) -> subprocess.CompletedProcess:
    """Run a command synchronously and wait for it to exit.

    Args:
        cmd: Command and arguments to run.
        cwd: Working directory for the command (default: current directory).
        timeout: Timeout in seconds, or None to wait indefinitely.
        capture_output: Whether to capture output. If False, the child
            inherits this process's stdout and stderr.
        merge_stderr: Capture stderr into stdout, as a single pipe would.
        env: Extra environment variables layered over os.environ.

    Returns:
        CompletedProcess with decoded output (if captured).

    Raises:
        subprocess.TimeoutExpired: If the command times out.
        OSError: If the command cannot be started.
    """
    kwargs: Dict[str, object] = {}
    if capture_output:
        kwargs["stdout"] = subprocess.PIPE
        kwargs["stderr"] = subprocess.STDOUT if merge_stderr else subprocess.PIPE

    full_env = None
    if env:
        full_env = dict(os.environ)
        full_env.update(env)

    return subprocess.run(
        cmd,
        text=True,
        encoding="utf-8",
        errors="replace",
        cwd=str(cwd) if cwd is not None else None,
        timeout=timeout,
        env=full_env,
        stdin=subprocess.DEVNULL,
        **kwargs,  # type: ignore[arg-type]
    )
