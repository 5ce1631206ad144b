"""Parse version output from ``mdbook --version`` and ``cargo search``."""

from __future__ import annotations


class VersionParseError(ValueError):
    """Raised when tool output does not contain a recognisable version."""


def parse_installed_version(output: str) -> str:
    """Extract ``0.4.40`` from ``mdbook v0.4.40``."""
    parts = output.split()
    if len(parts) < 2:
        raise VersionParseError(f"unexpected mdbook version output: {output.strip()!r}")
    version = parts[1]
    return version[1:] if version.startswith("v") else version


def parse_latest_version(output: str) -> str:
    """Extract the quoted version from the first line of ``cargo search mdbook``.

    The first line looks like ``mdbook = "0.4.40"    # Creates a book from markdown files``.
    """
    line = output.split("\n", 1)[0]
    start = line.find('"')
    end = line.rfind('"')
    if start < 0 or end <= start:
        raise VersionParseError("failed to parse latest mdbook version from cargo search output")
    return line[start + 1 : end]


def is_latest(installed: str, latest: str) -> bool:
    """Versions are compared as exact strings; any difference triggers a reinstall."""
    return installed == latest


__all__ = ["VersionParseError", "is_latest", "parse_installed_version", "parse_latest_version"]
