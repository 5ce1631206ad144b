"""Index synthesis: SUMMARY.md generation and file mirroring for mdbook."""

from .builder import IndexBuilder, IndexGenerationError, generate_index
from .mirror import MirrorError, mirror_file
from .naming import prettify
from .scanner import has_markdown_files
from .summary import SummaryWriter
from .walker import DirectoryWalker

__all__ = [
    "DirectoryWalker",
    "IndexBuilder",
    "IndexGenerationError",
    "MirrorError",
    "SummaryWriter",
    "generate_index",
    "has_markdown_files",
    "mirror_file",
    "prettify",
]
