"""Explanation helpers for kmpsearch results."""
from __future__ import annotations

from collections.abc import Sequence

from .models import SearchResult, Unit
from .tokens import split_text

_JOINERS = {Unit.CHAR: "", Unit.WORD: " ", Unit.LINE: " | ", Unit.ITEM: ", "}


def _elements(result: SearchResult, haystack: str | Sequence[object]) -> list[object]:
    if isinstance(haystack, str) and result.unit is not Unit.ITEM:
        return [token.value for token in split_text(haystack, result.unit)]
    return list(haystack)


def _render(values: Sequence[object], unit: Unit) -> str:
    if unit is Unit.ITEM:
        return _JOINERS[unit].join(repr(value) for value in values)
    return _JOINERS[unit].join(str(value) for value in values)


def _window(result: SearchResult, elements: Sequence[object], start: int, end: int) -> str:
    ctx = result.options.context
    left = elements[max(start - ctx, 0):start]
    right = elements[end:end + ctx]
    joiner = _JOINERS[result.unit]
    parts = []
    if start - ctx > 0:
        parts.append("...")
    if left:
        parts.append(_render(left, result.unit) + joiner)
    parts.append("[" + _render(elements[start:end], result.unit) + "]")
    if right:
        parts.append(joiner + _render(right, result.unit))
    if end + ctx < len(elements):
        parts.append("...")
    return "".join(parts)


def explain_dict(result: SearchResult, haystack: str | Sequence[object]) -> dict[str, object]:
    elements = _elements(result, haystack)
    payload = result.to_json()
    payload["windows"] = [
        {
            "start": match.start,
            "end": match.end,
            "offset": match.offset,
            "text": _window(result, elements, match.start, match.end),
        }
        for match in result.matches
    ]
    return payload


def explain_text(result: SearchResult, haystack: str | Sequence[object]) -> str:
    elements = _elements(result, haystack)
    positions = result.positions
    needle = _render(result.needle, result.unit)
    lines = [
        f"NEEDLE: [{needle}]" if result.unit is Unit.ITEM else f"NEEDLE: {needle!r}",
        f"UNIT: {result.unit.value}",
        f"LPS: {result.lps}",
        f"MATCHES: {len(positions)} at {positions}" + (" (truncated)" if result.truncated else ""),
    ]
    for match in result.matches:
        where = f"{match.start}" if match.offset in (None, match.start) else f"{match.start} (char {match.offset})"
        lines.append(f"  @{where}: {_window(result, elements, match.start, match.end)}")
    return "\n".join(lines)


def summarize_text(result: SearchResult) -> str:
    if not result.matches:
        return f"No occurrences of the needle among {result.haystack_length} {result.unit.value}(s)."
    overlaps = sum(
        1 for prev, cur in zip(result.matches, result.matches[1:]) if cur.start < prev.end
    )
    text = (
        f"Found {len(result.matches)} occurrence(s) among {result.haystack_length} "
        f"{result.unit.value}(s), first at {result.matches[0].start}"
    )
    if overlaps:
        text += f", {overlaps} overlapping the previous one"
    if result.truncated:
        text += "; stopped at the match limit"
    return text + "."
