"""Pipeline orchestration for the full, generate-index and serve flows."""

from __future__ import annotations

from typing import Callable, Optional

from .config import BookConfig
from .index import IndexBuilder
from .logging import get_logger
from .models import IndexResult
from .toolchain import MdBook, ToolchainBootstrapper

IndexReporter = Callable[[IndexResult], None]


class Orchestrator:
    """Coordinates bootstrap, index synthesis, build and serve steps.

    ``reporter`` is called with the index result as soon as SUMMARY.md has
    been written, on every flow that generates the index.
    """

    def __init__(
        self,
        config: BookConfig,
        bootstrapper: ToolchainBootstrapper | None = None,
        index_builder: IndexBuilder | None = None,
        mdbook: MdBook | None = None,
        reporter: Optional[IndexReporter] = None,
    ) -> None:
        self.config = config
        self.bootstrapper = bootstrapper or ToolchainBootstrapper()
        self.index_builder = index_builder or IndexBuilder()
        self.mdbook = mdbook or MdBook()
        self.reporter = reporter
        self.logger = get_logger("orchestrator")

    def run_all(self) -> IndexResult:
        """Bootstrap the toolchain, generate the index, build, then serve."""
        self.logger.debug("Running full pipeline for %s", self.config.source_root)
        self.bootstrapper.ensure()
        result = self.run_generate_index()
        self.mdbook.build(self.config.source_root)
        self.run_serve()
        return result

    def run_generate_index(self) -> IndexResult:
        result = self.index_builder.generate(self.config)
        if self.reporter is not None:
            self.reporter(result)
        return result

    def run_serve(self) -> None:
        self.mdbook.serve(self.config.source_root)


__all__ = ["IndexReporter", "Orchestrator"]
