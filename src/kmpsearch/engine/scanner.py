"""Knuth-Morris-Pratt scanning over arbitrary sequences."""
from __future__ import annotations

from collections.abc import Iterator, Sequence

from .lps import build_lps_table


def iter_occurrences(
    haystack: Sequence[object],
    needle: Sequence[object],
    table: Sequence[int] | None = None,
    overlapping: bool = True,
) -> Iterator[int]:
    """Yield the start index of every occurrence of ``needle`` in ``haystack``.

    Starts are produced in ascending order. With ``overlapping=False`` the scan
    restarts from an empty prefix after each match, so reported occurrences
    never share elements. An empty needle, or one longer than the haystack,
    yields nothing.
    """
    n = len(haystack)
    m = len(needle)
    if m == 0 or m > n:
        return
    if table is None:
        table = build_lps_table(needle)
    i = 0
    j = 0
    while i < n:
        if haystack[i] == needle[j]:
            i += 1
            j += 1
        # a full match must be handled before the mismatch fallback
        if j == m:
            yield i - j
            j = table[j - 1] if overlapping else 0
        elif i < n and haystack[i] != needle[j]:
            if j != 0:
                j = table[j - 1]
            else:
                i += 1


def find_all_occurrences(haystack: Sequence[object], needle: Sequence[object]) -> list[int]:
    """Return every (possibly overlapping) start of ``needle`` in ``haystack``.

    Examples:
        >>> find_all_occurrences("abababa", "aba")
        [0, 2, 4]
        >>> find_all_occurrences("abcdefg", "xyz")
        []
    """
    return list(iter_occurrences(haystack, needle))


def find_first(haystack: Sequence[object], needle: Sequence[object]) -> int:
    """Return the first start of ``needle`` in ``haystack`` or ``-1``."""
    return next(iter_occurrences(haystack, needle), -1)


def count_occurrences(
    haystack: Sequence[object], needle: Sequence[object], overlapping: bool = True
) -> int:
    return sum(1 for _ in iter_occurrences(haystack, needle, overlapping=overlapping))


def contains(haystack: Sequence[object], needle: Sequence[object]) -> bool:
    return find_first(haystack, needle) != -1


class KMPMatcher:
    """A needle with its failure table computed once, reusable across haystacks."""

    __slots__ = ("needle", "table")

    def __init__(self, needle: Sequence[object]) -> None:
        self.needle = tuple(needle)
        self.table = build_lps_table(self.needle)

    def __len__(self) -> int:
        return len(self.needle)

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"KMPMatcher({list(self.needle)!r})"

    def finditer(self, haystack: Sequence[object], overlapping: bool = True) -> Iterator[int]:
        return iter_occurrences(haystack, self.needle, self.table, overlapping)

    def findall(self, haystack: Sequence[object], overlapping: bool = True) -> list[int]:
        return list(self.finditer(haystack, overlapping))

    def find(self, haystack: Sequence[object]) -> int:
        return next(self.finditer(haystack), -1)

    def count(self, haystack: Sequence[object], overlapping: bool = True) -> int:
        return sum(1 for _ in self.finditer(haystack, overlapping))
