"""Subprocess runner shared by the toolchain helpers."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, Optional

Runner = Callable[..., str]


def default_runner(
    args: Iterable[str],
    *,
    cwd: Optional[Path] = None,
    capture_output: bool = False,
) -> str:
    """Run ``args`` and return stdout when captured.

    Uncaptured runs inherit stdin, stdout and stderr from this process, which
    is what lets ``mdbook serve`` be stopped with Ctrl+C.
    """
    completed = subprocess.run(
        list(args),
        cwd=str(cwd) if cwd is not None else None,
        check=True,
        text=True,
        capture_output=capture_output,
    )
    if capture_output:
        return completed.stdout
    return ""


def describe_failure(args: Iterable[str], exc: BaseException) -> str:
    command = " ".join(args)
    if isinstance(exc, subprocess.CalledProcessError):
        return f"`{command}` exited with status {exc.returncode}"
    return f"`{command}` could not be started: {exc}"


__all__ = ["Runner", "default_runner", "describe_failure"]
