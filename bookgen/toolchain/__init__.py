"""Toolchain collaborators: bootstrap rustup/cargo/mdbook and run mdbook."""

from .bootstrap import ToolchainBootstrapper, ToolchainError
from .mdbook import GeneratorError, MdBook
from .versions import VersionParseError, is_latest, parse_installed_version, parse_latest_version

__all__ = [
    "GeneratorError",
    "MdBook",
    "ToolchainBootstrapper",
    "ToolchainError",
    "VersionParseError",
    "is_latest",
    "parse_installed_version",
    "parse_latest_version",
]
