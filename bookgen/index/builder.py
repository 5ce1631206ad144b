"""Generate the mdbook SUMMARY.md and input tree from a docs directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from ..config import BookConfig
from ..logging import get_logger
from ..models import IndexResult
from .mirror import MirrorError, ensure_directory
from .summary import SummaryWriter
from .walker import DirectoryWalker


class IndexGenerationError(RuntimeError):
    """Raised when the summary file or generator input directory cannot be prepared."""


class IndexBuilder:
    """Drives the directory walker over the top level of the docs tree.

    The first chapter directory is emitted before everything else; the
    remaining top-level directories follow in name order.
    """

    def __init__(self) -> None:
        self.logger = get_logger("index")

    def generate(self, config: BookConfig) -> IndexResult:
        source_root = config.source_root
        try:
            ensure_directory(config.destination_dir)
        except OSError as exc:
            raise IndexGenerationError(
                f"Could not create {config.destination_dir}: {exc}"
            ) from exc

        result = IndexResult(summary_path=config.summary_path)
        walker = DirectoryWalker(config, result)

        try:
            handle = config.summary_path.open("w", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise IndexGenerationError(
                f"Could not create {config.summary_path}: {exc}"
            ) from exc

        self.logger.info("Generating %s from %s", config.summary_name, source_root)
        with handle:
            sink = SummaryWriter(handle)
            sink.header()

            first_chapter = source_root / config.first_chapter
            if os.path.isdir(first_chapter):
                self.logger.debug("Walking first chapter %s", config.first_chapter)
                self._walk(walker, first_chapter, config.first_chapter, sink)

            for name in self._top_level_directories(config):
                self._walk(walker, source_root / name, name, sink)

            result.entries = sink.entry_count

        self.logger.info(
            "%s generated at %s (%d entries, %d files mirrored)",
            config.summary_name,
            config.summary_path,
            result.entries,
            len(result.mirrored),
        )
        if result.failed:
            self.logger.warning(
                "%d file(s) could not be mirrored: %s",
                len(result.failed),
                ", ".join(result.failed),
            )
        return result

    def _walk(self, walker: DirectoryWalker, directory: Path, name: str, sink: SummaryWriter) -> None:
        try:
            walker.walk(directory, name, "", sink)
        except MirrorError as exc:
            raise IndexGenerationError(str(exc)) from exc

    def _top_level_directories(self, config: BookConfig) -> List[str]:
        try:
            with os.scandir(config.source_root) as iterator:
                names = sorted(
                    entry.name for entry in iterator if entry.is_dir(follow_symlinks=False)
                )
        except OSError as exc:
            self.logger.debug("Could not list %s: %s", config.source_root, exc)
            return []
        return [
            name
            for name in names
            if name != config.first_chapter and not config.is_ignored(name)
        ]


def generate_index(config: BookConfig) -> IndexResult:
    """Convenience wrapper around :class:`IndexBuilder`."""
    return IndexBuilder().generate(config)


__all__ = ["IndexBuilder", "IndexGenerationError", "generate_index"]
