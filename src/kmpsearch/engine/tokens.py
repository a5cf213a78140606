"""Splitting text into element sequences."""
from __future__ import annotations

import re
from collections.abc import Sequence

from .models import Unit

_WORD_RE = re.compile(r"\S+")
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+$")


class Token:
    __slots__ = ("value", "offset")

    def __init__(self, value: object, offset: int | None) -> None:
        self.value = value
        self.offset = offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.value == other.value and self.offset == other.offset

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"Token({self.value!r}, {self.offset})"


def _split_lines(text: str) -> list[Token]:
    tokens: list[Token] = []
    for match in _LINE_RE.finditer(text):
        raw = match.group(0)
        if not raw:
            continue
        tokens.append(Token(raw.rstrip("\r\n"), match.start()))
    return tokens


def split_text(text: str, unit: Unit | str) -> list[Token]:
    """Split ``text`` into tokens carrying their character offset.

    Examples:
        >>> [t.value for t in split_text("to be or", "word")]
        ['to', 'be', 'or']
        >>> [t.offset for t in split_text("to be or", "word")]
        [0, 3, 6]
    """
    unit = Unit(unit)
    if unit is Unit.CHAR:
        return [Token(ch, index) for index, ch in enumerate(text)]
    if unit is Unit.WORD:
        return [Token(m.group(0), m.start()) for m in _WORD_RE.finditer(text)]
    if unit is Unit.LINE:
        return _split_lines(text)
    raise ValueError("text inputs cannot be split with unit 'item'")


def normalize(values: Sequence[object], ignore_case: bool) -> list[object]:
    """Return the comparison keys for ``values``; strings are casefolded on request."""
    if not ignore_case:
        return list(values)
    return [value.casefold() if isinstance(value, str) else value for value in values]
