"""Spelling suggestions for near-miss keywords."""

from __future__ import annotations

from collections.abc import Iterable


def suggest_keyword(word: str, candidates: Iterable[str]) -> str | None:
    """Return the first candidate of the same length differing in one or two places."""
    for target in candidates:
        if len(word) != len(target):
            continue
        diff = sum(1 for a, b in zip(word, target) if a != b)
        if diff in (1, 2):
            return target
    return None


def format_suggestion(word: str, candidates: Iterable[str], line: int) -> str | None:
    """Return a 'Did you mean' message for ``word``, or None if nothing is close."""
    target = suggest_keyword(word, candidates)
    if target is None:
        return None
    return f"Did you mean '{target}'? (line {line})"