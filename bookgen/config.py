"""Configuration for bookgen runs (optional .bookgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional

import yaml

CONFIG_FILENAME = ".bookgen.yml"

DEFAULT_DOCS_DIR = "docs"
DEFAULT_OUTPUT_DIR_NAME = "src"
DEFAULT_SUMMARY_NAME = "SUMMARY.md"
DEFAULT_FIRST_CHAPTER = "introduction"
DEFAULT_IGNORED_DIRS: FrozenSet[str] = frozenset(
    {"scripts", "src", ".git", "node_modules", ".github", ".vscode"}
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class BookConfig:
    """Settings for one index synthesis and build run.

    ``source_root`` is the documentation tree handed to ``mdbook``; the
    generator reads from ``destination_dir`` underneath it.
    """

    source_root: Path
    output_dir_name: str = DEFAULT_OUTPUT_DIR_NAME
    summary_name: str = DEFAULT_SUMMARY_NAME
    ignored_dirs: FrozenSet[str] = field(default_factory=lambda: DEFAULT_IGNORED_DIRS)
    first_chapter: str = DEFAULT_FIRST_CHAPTER
    strict_mirror: bool = False

    @property
    def destination_dir(self) -> Path:
        return self.source_root / self.output_dir_name

    @property
    def summary_path(self) -> Path:
        return self.destination_dir / self.summary_name

    def is_ignored(self, name: str) -> bool:
        """Case-sensitive membership test against the ignored directory names."""
        return name in self.ignored_dirs

    def with_source_root(self, source_root: Path | str) -> "BookConfig":
        return replace(self, source_root=Path(source_root).expanduser().resolve())


def default_config(cwd: Path | None = None) -> BookConfig:
    """Return the stock configuration rooted at ``<cwd>/docs``."""
    base = (cwd or Path.cwd()).resolve()
    return BookConfig(source_root=base / DEFAULT_DOCS_DIR)


def load_config(config_path: Path, *, source_root: Path | str | None = None) -> BookConfig:
    """Load configuration from ``config_path`` (a file or a directory holding one).

    ``source_root`` takes precedence over any ``docs_dir`` in the file.
    """
    config_file = _resolve_config_path(config_path)
    base = config_file.parent

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    docs_dir = _as_str(data.get("docs_dir")) or DEFAULT_DOCS_DIR
    config = BookConfig(source_root=(base / docs_dir).resolve())

    first_chapter = _as_str(data.get("first_chapter"))
    if first_chapter:
        config = replace(config, first_chapter=first_chapter)

    if "ignored_dirs" in data:
        ignored = data.get("ignored_dirs")
        if not isinstance(ignored, list):
            raise ConfigError("ignored_dirs must be a list of directory names")
        config = replace(config, ignored_dirs=frozenset(str(item) for item in ignored))

    strict = data.get("strict_mirror")
    if strict is not None:
        if not isinstance(strict, bool):
            raise ConfigError("strict_mirror must be true or false")
        config = replace(config, strict_mirror=strict)

    if source_root is not None:
        config = config.with_source_root(source_root)
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


__all__ = [
    "BookConfig",
    "ConfigError",
    "CONFIG_FILENAME",
    "DEFAULT_IGNORED_DIRS",
    "default_config",
    "load_config",
]
