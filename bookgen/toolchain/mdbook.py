"""Invoke the mdbook ``build`` and ``serve`` subcommands."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

from ..logging import get_logger
from .runner import Runner, default_runner, describe_failure


class GeneratorError(RuntimeError):
    """Raised when an mdbook subcommand fails or mdbook is not installed."""


class MdBook:
    """Thin wrapper around the mdbook executable."""

    def __init__(self, executable: str = "mdbook", runner: Runner | None = None) -> None:
        self.executable = executable
        self._runner = runner or default_runner
        self.logger = get_logger("toolchain.mdbook")

    def build(self, source_root: Path) -> None:
        """Run ``mdbook build <source_root>`` with output streamed to the console."""
        self.logger.info("Building the mdBook from %s", source_root)
        self._run([self.executable, "build", str(source_root)])
        self.logger.info("Build complete")

    def serve(self, source_root: Path, *, open_browser: bool = True) -> None:
        """Run ``mdbook serve`` from inside ``source_root`` until the user stops it."""
        args = [self.executable, "serve"]
        if open_browser:
            args.append("--open")
        self.logger.info("Serving mdBook from %s on localhost", source_root)
        self._run(args, cwd=source_root)

    def _run(self, args: List[str], *, cwd: Path | None = None) -> None:
        try:
            self._runner(args, cwd=cwd)
        except (subprocess.CalledProcessError, OSError) as exc:
            raise GeneratorError(describe_failure(args, exc)) from exc


__all__ = ["GeneratorError", "MdBook"]
