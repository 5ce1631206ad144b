"""Copy Markdown sources into the mdbook input directory."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

DIRECTORY_MODE = 0o755


class MirrorError(OSError):
    """Raised when a source file cannot be copied to its mirror location."""

    def __init__(self, source: Path, destination: Path, reason: OSError) -> None:
        super().__init__(f"Failed to mirror {source} -> {destination}: {reason}")
        self.source = source
        self.destination = destination
        self.reason = reason


def ensure_directory(path: Path) -> None:
    os.makedirs(path, mode=DIRECTORY_MODE, exist_ok=True)


def mirror_file(source: Path, destination: Path) -> Path:
    """Byte-copy ``source`` to ``destination``, creating parent directories.

    Existing content at ``destination`` is replaced. Returns ``destination``.
    """
    try:
        ensure_directory(destination.parent)
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise MirrorError(source, destination, exc) from exc
    return destination


__all__ = ["DIRECTORY_MODE", "MirrorError", "ensure_directory", "mirror_file"]
