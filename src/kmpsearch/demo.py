"""Demonstration scenarios printed by ``kmpsearch demo``."""
from __future__ import annotations

from collections.abc import Sequence

from .engine.scanner import find_all_occurrences

SCENARIOS: list[tuple[str, Sequence[object], Sequence[object]]] = [
    ("Text search", "ABABCABABABCD", "ABABCD"),
    ("Overlapping occurrences", "abababa", "aba"),
    ("Integer sequence", [1, 2, 3, 1, 2, 4, 5, 1, 2, 3, 1, 2, 3, 5], [1, 2, 3, 5]),
    ("No occurrences", "abcdefg", "xyz"),
]


def _label(value: Sequence[object]) -> str:
    return f"'{value}'" if isinstance(value, str) else str(list(value))


def run_demo() -> str:
    blocks = []
    for title, haystack, needle in SCENARIOS:
        matches = find_all_occurrences(haystack, needle)
        blocks.append(
            "\n".join(
                [
                    f"{title}",
                    f"Haystack: {_label(haystack)}",
                    f"Needle:   {_label(needle)}",
                    f"Found at: {matches}",
                ]
            )
        )
    return "\n---\n".join(blocks) + "\n"
