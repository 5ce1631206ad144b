"""CLI entrypoint for bookgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .config import BookConfig, ConfigError, load_config
from .index import IndexGenerationError
from .logging import configure_logging, get_logger
from .models import IndexResult
from .orchestrator import Orchestrator
from .toolchain import GeneratorError, ToolchainError

COMMANDS = ("generate-index", "serve")
USAGE_LINE = "Usage: app [generate-index|serve]"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookgen",
        description=(
            "Build an mdBook from the Markdown under docs/. Without a command, "
            "installs/updates mdbook, generates the index, builds and serves the book."
        ),
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Optional step to run on its own: generate-index or serve.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--docs-dir",
        default=None,
        help="Documentation root handed to mdbook (defaults to ./docs).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .bookgen.yml file (defaults to ./.bookgen.yml when present).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write debug logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for bookgen commands."""
    parser = _build_parser()
    tokens = list(sys.argv[1:] if argv is None else argv)
    args, extras = parser.parse_known_args(tokens)

    unknown = _unknown_command(tokens, args.command, extras)
    if unknown is not None:
        print(f"Unknown command: {unknown}")
        print(USAGE_LINE)
        parser.exit(1)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=Path(args.log_file) if args.log_file else None,
    )
    logger = get_logger("cli")
    if extras:
        logger.debug("Ignoring extra arguments: %s", " ".join(extras))

    try:
        config = _load_config(args)
    except (ConfigError, FileNotFoundError) as exc:
        parser.exit(1, f"bookgen: invalid configuration: {exc}\n")

    orchestrator = Orchestrator(config, reporter=_report_index)
    step = args.command or "pipeline"

    try:
        if args.command == "generate-index":
            orchestrator.run_generate_index()
        elif args.command == "serve":
            orchestrator.run_serve()
        else:
            orchestrator.run_all()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        parser.exit(130)
    except (IndexGenerationError, ToolchainError, GeneratorError) as exc:
        logger.error("%s", exc)
        parser.exit(1, f"bookgen {step} failed: {exc}\nRun with --verbose for more details.\n")


def _unknown_command(
    tokens: Sequence[str], command: str | None, extras: Sequence[str]
) -> str | None:
    """Return the token to report as unknown, if the first argument is not a command.

    Arguments left over after a valid command are ignored.
    """
    if command is not None and command not in COMMANDS:
        return command
    if not extras:
        return None
    if command is None:
        return extras[0]
    try:
        if tokens.index(extras[0]) < tokens.index(command):
            return extras[0]
    except ValueError:
        return extras[0]
    return None


def _report_index(result: IndexResult) -> None:
    print(f"{result.summary_path.name} generated at {_relativize(result.summary_path)}")


def _load_config(args: argparse.Namespace) -> BookConfig:
    if args.config:
        config_path = Path(args.config)
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = Path.cwd()
    return load_config(config_path, source_root=args.docs_dir)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
