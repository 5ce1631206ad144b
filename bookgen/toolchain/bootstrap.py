"""Install or update the Rust toolchain and mdbook."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable, List, MutableMapping, Optional

from ..logging import get_logger
from .runner import Runner, default_runner, describe_failure
from .versions import VersionParseError, is_latest, parse_installed_version, parse_latest_version

RUSTUP_INSTALL_SCRIPT = "curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh -s -- -y"


class ToolchainError(RuntimeError):
    """Raised when the toolchain cannot be installed or updated."""


class ToolchainBootstrapper:
    """Makes sure ``cargo`` and an up-to-date ``mdbook`` are on PATH."""

    def __init__(
        self,
        runner: Runner | None = None,
        which: Callable[[str], Optional[str]] | None = None,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self._runner = runner or default_runner
        self._environ = environ if environ is not None else os.environ
        self._which = which or self._which_on_path
        self.logger = get_logger("toolchain")

    def ensure(self) -> None:
        self.logger.info("Checking for Rust + mdBook...")

        if not self.command_exists("rustup"):
            self.logger.info("Installing Rust...")
            self._run(["sh", "-c", RUSTUP_INSTALL_SCRIPT])
        else:
            self.logger.info("Rust is already installed")
        self._add_cargo_bin_to_path()

        if not self.command_exists("cargo"):
            raise ToolchainError("Cargo still not found. Check your Rust install.")

        if not self.command_exists("mdbook"):
            self.logger.info("Installing mdBook...")
            self._install_mdbook(force=False)
            return

        try:
            installed = self.installed_version()
        except (ToolchainError, VersionParseError) as exc:
            self.logger.warning("Could not get installed mdbook version (%s); reinstalling", exc)
            self._install_mdbook(force=True)
            return

        try:
            latest = self.latest_version()
        except (ToolchainError, VersionParseError) as exc:
            self.logger.warning("Could not get latest mdbook version (%s); updating", exc)
            self._install_mdbook(force=True)
            return

        if is_latest(installed, latest):
            self.logger.info("mdBook is up-to-date (version %s)", installed)
        else:
            self.logger.info("Updating mdBook from %s to %s...", installed, latest)
            self._install_mdbook(force=True)

    def command_exists(self, name: str) -> bool:
        return self._which(name) is not None

    def installed_version(self) -> str:
        return parse_installed_version(self._run(["mdbook", "--version"], capture_output=True))

    def latest_version(self) -> str:
        return parse_latest_version(self._run(["cargo", "search", "mdbook"], capture_output=True))

    # ------------------------------------------------------------------
    # Helpers

    def _install_mdbook(self, *, force: bool) -> None:
        args = ["cargo", "install", "mdbook"]
        if force:
            args.append("--force")
        self._run(args)

    def _which_on_path(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self._environ.get("PATH"))

    def _add_cargo_bin_to_path(self) -> None:
        cargo_home = self._environ.get("CARGO_HOME") or str(Path.home() / ".cargo")
        cargo_bin = str(Path(cargo_home) / "bin")
        if not Path(cargo_bin).is_dir():
            return
        entries = [entry for entry in self._environ.get("PATH", "").split(os.pathsep) if entry]
        if cargo_bin in entries:
            return
        self._environ["PATH"] = os.pathsep.join([cargo_bin, *entries])
        self.logger.debug("Added %s to PATH", cargo_bin)

    def _run(self, args: List[str], *, capture_output: bool = False) -> str:
        try:
            return self._runner(args, capture_output=capture_output)
        except (subprocess.CalledProcessError, OSError) as exc:
            raise ToolchainError(describe_failure(args, exc)) from exc


__all__ = ["RUSTUP_INSTALL_SCRIPT", "ToolchainBootstrapper", "ToolchainError"]
