"""Title helpers for summary entries."""

from __future__ import annotations


def prettify(name: str) -> str:
    """Turn a file stem or directory name into a display title.

    ``"setup_steps"`` -> ``"Setup Steps"``, ``"api-v2"`` -> ``"Api V2"``.
    Only the first code point of each word is uppercased.
    """
    words = name.replace("-", " ").replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


__all__ = ["prettify"]
