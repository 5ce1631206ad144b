"""Tests for bookgen.index.scanner."""

from __future__ import annotations

from pathlib import Path

from bookgen.index.scanner import has_markdown_files, is_markdown_name


def test_readme_short_circuits(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("# Hi\n", encoding="utf-8")

    assert has_markdown_files(tmp_path) is True


def test_nested_markdown_is_detected(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b" / "c"
    nested.mkdir(parents=True)
    (nested / "deep.MD").write_text("deep", encoding="utf-8")

    assert has_markdown_files(tmp_path) is True


def test_tree_without_markdown(tmp_path: Path) -> None:
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "diagram.png").write_bytes(b"\x89PNG")
    (tmp_path / "notes.txt").write_text("plain", encoding="utf-8")

    assert has_markdown_files(tmp_path) is False


def test_missing_directory_has_no_markdown(tmp_path: Path) -> None:
    assert has_markdown_files(tmp_path / "missing") is False


def test_readme_directory_does_not_count(tmp_path: Path) -> None:
    (tmp_path / "README.md").mkdir()

    assert has_markdown_files(tmp_path) is False


def test_markdown_suffix_is_case_insensitive() -> None:
    assert is_markdown_name("guide.md")
    assert is_markdown_name("GUIDE.Md")
    assert not is_markdown_name("guide.mdx")
    assert not is_markdown_name("md")
