"""Tests for bookgen.index.walker."""

from __future__ import annotations

import io
import os

import pytest

from bookgen.index.mirror import MirrorError
from bookgen.index.summary import SummaryWriter
from bookgen.index.walker import DirectoryWalker
from bookgen.models import IndexResult


def _walk(docs_builder, name: str, **overrides):  # type: ignore[no-untyped-def]
    config = docs_builder.config(**overrides)
    result = IndexResult(summary_path=config.summary_path)
    stream = io.StringIO()
    DirectoryWalker(config, result).walk(config.source_root / name, name, "", SummaryWriter(stream))
    return stream.getvalue(), result


def test_walker_lists_readme_then_sorted_files(docs_builder) -> None:
    docs_builder.write(
        {
            "guide/README.md": "# Guide\n",
            "guide/zebra.md": "z\n",
            "guide/alpha_one.md": "a\n",
            "guide/Middle.MD": "m\n",
            "guide/notes.txt": "not markdown\n",
        }
    )

    output, result = _walk(docs_builder, "guide")

    assert output == (
        "- [Guide](guide/README.md)\n"
        "  - [Middle](guide/Middle.MD)\n"
        "  - [Alpha One](guide/alpha_one.md)\n"
        "  - [Zebra](guide/zebra.md)\n"
        "\n"
    )
    assert result.mirrored == [
        "guide/README.md",
        "guide/Middle.MD",
        "guide/alpha_one.md",
        "guide/zebra.md",
    ]
    assert result.failed == []


def test_walker_emits_heading_without_readme(docs_builder) -> None:
    docs_builder.write({"guide/setup_steps.md": "steps\n"})

    output, _ = _walk(docs_builder, "guide")

    assert output == "- [Guide]()\n  - [Setup Steps](guide/setup_steps.md)\n\n"
    assert docs_builder.mirrored("guide/setup_steps.md").read_text(encoding="utf-8") == "steps\n"


def test_walker_skips_directory_without_markdown(docs_builder) -> None:
    docs_builder.write({"assets/logo.svg": "<svg/>\n"})

    output, result = _walk(docs_builder, "assets")

    assert output == ""
    assert result.mirrored == []


def test_walker_only_lists_direct_children(docs_builder) -> None:
    docs_builder.write(
        {
            "api/README.md": "api\n",
            "api/v1/README.md": "v1\n",
            "api/v1/methods.md": "methods\n",
        }
    )

    output, _ = _walk(docs_builder, "api")

    assert output == (
        "- [Api](api/README.md)\n"
        "\n"
        "  - [V1](api/v1/README.md)\n"
        "    - [Methods](api/v1/methods.md)\n"
        "\n"
    )
    assert not docs_builder.mirrored("api/methods.md").exists()


def test_walker_lists_readme_lookalikes_as_files(docs_builder) -> None:
    docs_builder.write({"misc/README.md": "r\n", "misc/FOOREADME.md": "f\n"})

    output, _ = _walk(docs_builder, "misc")

    assert "  - [Fooreadme](misc/FOOREADME.md)\n" in output


def test_walker_never_descends_into_ignored_names(docs_builder) -> None:
    docs_builder.write(
        {
            "guide/README.md": "g\n",
            "guide/node_modules/pkg.md": "pkg\n",
            "guide/scripts/tool.md": "tool\n",
            "guide/Scripts/kept.md": "kept\n",
        }
    )

    output, _ = _walk(docs_builder, "guide")

    assert "node_modules" not in output
    assert "guide/scripts/" not in output
    assert "  - [Scripts]()\n    - [Kept](guide/Scripts/kept.md)\n" in output
    assert not docs_builder.mirrored("guide/node_modules/pkg.md").exists()


def test_walker_ignores_generator_input_directory(docs_builder) -> None:
    docs_builder.write({"src/intro.md": "already mirrored\n"})

    output, result = _walk(docs_builder, "src")

    assert output == ""
    assert result.mirrored == []


def test_walker_records_mirror_failures_and_keeps_going(docs_builder, monkeypatch) -> None:
    docs_builder.write({"guide/a.md": "a\n", "guide/b.md": "b\n"})

    import bookgen.index.walker as walker_module

    real_mirror = walker_module.mirror_file

    def flaky_mirror(source, destination):  # type: ignore[no-untyped-def]
        if source.name == "a.md":
            raise MirrorError(source, destination, PermissionError("denied"))
        return real_mirror(source, destination)

    monkeypatch.setattr(walker_module, "mirror_file", flaky_mirror)

    output, result = _walk(docs_builder, "guide")

    assert "  - [A](guide/a.md)\n" in output
    assert "  - [B](guide/b.md)\n" in output
    assert result.failed == ["guide/a.md"]
    assert result.mirrored == ["guide/b.md"]


def test_walker_strict_mirror_raises(docs_builder, monkeypatch) -> None:
    docs_builder.write({"guide/a.md": "a\n"})

    import bookgen.index.walker as walker_module

    def failing_mirror(source, destination):  # type: ignore[no-untyped-def]
        raise MirrorError(source, destination, PermissionError("denied"))

    monkeypatch.setattr(walker_module, "mirror_file", failing_mirror)

    with pytest.raises(MirrorError):
        _walk(docs_builder, "guide", strict_mirror=True)


def test_walker_treats_unreadable_readme_stat_as_absent(docs_builder, monkeypatch) -> None:
    docs_builder.write({"guide/README.md": "g\n", "guide/locked/x.md": "x\n"})
    locked_readme = str(docs_builder.root.resolve() / "guide" / "locked" / "README.md")

    real_stat = os.stat

    def stat(path, *args, **kwargs):  # type: ignore[no-untyped-def]
        if os.fspath(path) == locked_readme:
            raise PermissionError(13, "Permission denied", locked_readme)
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", stat)

    output, _ = _walk(docs_builder, "guide")

    assert output == (
        "- [Guide](guide/README.md)\n"
        "\n"
        "  - [Locked]()\n"
        "    - [X](guide/locked/x.md)\n"
        "\n"
    )
