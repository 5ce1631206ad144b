"""Recursive directory walk that emits summary entries and mirrors files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from ..config import BookConfig
from ..logging import get_logger
from ..models import DirectoryEntry, IndexResult, MarkdownEntry
from .mirror import MirrorError, mirror_file
from .naming import prettify
from .scanner import README_NAME, has_markdown_files, has_readme, is_markdown_name
from .summary import SummaryWriter

INDENT_STEP = "  "


class DirectoryWalker:
    """Walks one documentation tree on behalf of the index builder.

    Each visited directory contributes a heading line (linked to its README
    when there is one), one nested line per direct Markdown child, and then
    the same for each eligible subdirectory, two spaces deeper.
    """

    def __init__(self, config: BookConfig, result: IndexResult) -> None:
        self.config = config
        self.result = result
        self.logger = get_logger("index.walker")
        self._destination = config.destination_dir.resolve()

    def walk(
        self,
        current_dir: Path,
        relative_path: str,
        indent: str,
        sink: SummaryWriter,
    ) -> None:
        if self._inside_destination(current_dir):
            self.logger.debug("Skipping generator input directory %s", current_dir)
            return

        entry = self._describe(current_dir, relative_path)

        if entry.has_readme:
            sink.entry(indent, entry.title, entry.readme_link)
            self._mirror(current_dir / README_NAME, entry.readme_link)
        elif entry.has_markdown:
            sink.entry(indent, entry.title)

        for child in self._markdown_children(current_dir, relative_path):
            sink.entry(indent + INDENT_STEP, child.title, child.relative_path)
            self._mirror(child.source, child.relative_path)

        if entry.has_markdown:
            sink.blank()

        for name in self._subdirectories(current_dir):
            if self.config.is_ignored(name):
                self.logger.debug("Ignoring %s/%s", relative_path, name)
                continue
            self.walk(
                current_dir / name,
                f"{relative_path}/{name}",
                indent + INDENT_STEP,
                sink,
            )

    # ------------------------------------------------------------------
    # Internals

    def _inside_destination(self, directory: Path) -> bool:
        return directory.resolve().is_relative_to(self._destination)

    def _describe(self, directory: Path, relative_path: str) -> DirectoryEntry:
        return DirectoryEntry(
            path=directory,
            relative_path=relative_path,
            title=prettify(directory.name),
            has_markdown=has_markdown_files(directory),
            has_readme=has_readme(directory),
        )

    def _markdown_children(self, directory: Path, relative_path: str) -> List[MarkdownEntry]:
        files = sorted(
            directory / entry.name
            for entry in self._scandir(directory)
            if _is_file(entry) and is_markdown_name(entry.name) and entry.name != README_NAME
        )
        return [
            MarkdownEntry(
                source=path,
                relative_path=f"{relative_path}/{path.name}",
                title=prettify(path.name[: -len(".md")]),
            )
            for path in files
        ]

    def _subdirectories(self, directory: Path) -> List[str]:
        return sorted(entry.name for entry in self._scandir(directory) if _is_dir(entry))

    def _scandir(self, directory: Path) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as iterator:
                return list(iterator)
        except OSError as exc:
            self.logger.debug("Could not list %s: %s", directory, exc)
            return []

    def _mirror(self, source: Path, relative_link: str) -> None:
        destination = self.config.destination_dir / relative_link
        try:
            mirror_file(source, destination)
        except MirrorError as exc:
            self.result.failed.append(relative_link)
            if self.config.strict_mirror:
                raise
            self.logger.warning("%s", exc)
            return
        self.result.mirrored.append(relative_link)
        self.logger.debug("Mirrored %s", relative_link)


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


__all__ = ["DirectoryWalker", "INDENT_STEP"]
