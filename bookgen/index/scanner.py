"""Detect whether a directory subtree holds any Markdown."""

from __future__ import annotations

import os
from pathlib import Path

README_NAME = "README.md"
MARKDOWN_SUFFIX = ".md"


def is_markdown_name(name: str) -> bool:
    """Markdown detection is case-insensitive on the extension."""
    return name.lower().endswith(MARKDOWN_SUFFIX)


def has_readme(directory: Path) -> bool:
    # Any stat failure counts as absent.
    return os.path.isfile(directory / README_NAME)


def has_markdown_files(directory: Path) -> bool:
    """Return True if ``directory`` or any descendant contains a ``.md`` file."""
    if has_readme(directory):
        return True

    # Walk errors (permissions, races) are skipped rather than raised.
    for _dirpath, _dirnames, filenames in os.walk(directory, onerror=lambda _err: None):
        if any(is_markdown_name(filename) for filename in filenames):
            return True
    return False


__all__ = ["README_NAME", "has_markdown_files", "has_readme", "is_markdown_name"]
