"""String helpers: reversal and ordering by length."""

from __future__ import annotations

from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def sort_by_length(strings: Iterable[str]) -> list[str]:
    """Sort strings longest first; strings of equal length in lexicographic order."""
    return sorted(strings, key=lambda item: (-len(item), item))