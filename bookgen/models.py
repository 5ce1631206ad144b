"""Core data models shared across bookgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class SummaryLine:
    """One bullet of the mdbook table of contents.

    An empty ``link`` renders as ``()``, which mdbook treats as a draft chapter
    heading.
    """

    indent: str
    title: str
    link: Optional[str] = None

    def render(self) -> str:
        return f"{self.indent}- [{self.title}]({self.link or ''})\n"


@dataclass(frozen=True)
class MarkdownEntry:
    """A Markdown file (other than README.md) listed under its directory."""

    source: Path
    relative_path: str
    title: str


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory visited by the walker."""

    path: Path
    relative_path: str
    title: str
    has_markdown: bool
    has_readme: bool

    @property
    def readme_link(self) -> str:
        return f"{self.relative_path}/README.md"


@dataclass
class IndexResult:
    """Outcome of one index synthesis run."""

    summary_path: Path
    entries: int = 0
    mirrored: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
