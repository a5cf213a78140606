"""Failure-function (LPS table) construction."""
from __future__ import annotations

from collections.abc import Sequence


def build_lps_table(needle: Sequence[object]) -> list[int]:
    """Return the longest-proper-prefix-suffix table for ``needle``.

    ``table[k]`` is the length of the longest proper prefix of ``needle[:k + 1]``
    that is also a suffix of it. The empty needle yields an empty table.

    Examples:
        >>> build_lps_table("ababaca")
        [0, 0, 1, 2, 3, 0, 1]
        >>> build_lps_table([1, 1, 1])
        [0, 1, 2]
    """
    size = len(needle)
    if size == 0:
        return []
    table = [0] * size
    length = 0
    k = 1
    while k < size:
        if needle[k] == needle[length]:
            length += 1
            table[k] = length
            k += 1
        elif length != 0:
            # retry the same k against a shorter border
            length = table[length - 1]
        else:
            table[k] = 0
            k += 1
    return table


def lps_border_chain(table: Sequence[int], k: int) -> list[int]:
    """Return the border lengths visited when falling back from position ``k``.

    The chain starts at ``table[k]`` and follows ``table[length - 1]`` until it
    reaches 0, which is always the last entry.
    """
    if not 0 <= k < len(table):
        raise IndexError(f"position {k} outside table of length {len(table)}")
    chain = [table[k]]
    while chain[-1] > 0:
        chain.append(table[chain[-1] - 1])
    return chain
