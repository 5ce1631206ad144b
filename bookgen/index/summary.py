"""Writer for the mdbook SUMMARY.md table of contents."""

from __future__ import annotations

from typing import List, TextIO

from ..models import SummaryLine

SUMMARY_HEADER = "# Summary\n"


class SummaryWriter:
    """Appends summary lines to an open text stream.

    The stream stays owned by the caller; the writer only appends to it.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.lines: List[SummaryLine] = []

    def header(self) -> None:
        self._stream.write(SUMMARY_HEADER)

    def entry(self, indent: str, title: str, link: str | None = None) -> SummaryLine:
        line = SummaryLine(indent=indent, title=title, link=link)
        self._stream.write(line.render())
        self.lines.append(line)
        return line

    def blank(self) -> None:
        self._stream.write("\n")

    @property
    def entry_count(self) -> int:
        return len(self.lines)


__all__ = ["SUMMARY_HEADER", "SummaryWriter"]
