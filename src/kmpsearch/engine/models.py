"""Data models shared across the kmpsearch engine."""
from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field, fields


class Unit(str, enum.Enum):
    CHAR = "char"
    WORD = "word"
    LINE = "line"
    ITEM = "item"


@dataclass(frozen=True)
class SearchOptions:
    """Options controlling a high-level search.

    unit: How text inputs are split into elements before scanning
        - "char": every code point is an element
        - "word": whitespace-separated words
        - "line": lines without their terminators
        - "item": inputs are already sequences (JSON arrays, lists, tuples)

    ignore_case: Casefold string elements of both haystack and needle.
    overlapping: Report overlapping occurrences (``"aa"`` in ``"aaa"`` -> 0, 1).
    max_matches: Stop after this many matches (None = no limit).
    context: Elements shown on each side of a match in text explanations.
    """
    unit: Unit = Unit.CHAR
    ignore_case: bool = False
    overlapping: bool = True
    max_matches: int | None = None
    context: int = 10

    def __post_init__(self) -> None:
        try:
            unit = Unit(self.unit)
        except ValueError:
            valid = ", ".join(u.value for u in Unit)
            raise ValueError(f"Invalid unit: {self.unit!r}. Must be one of {valid}") from None
        object.__setattr__(self, "unit", unit)
        for name in ("ignore_case", "overlapping"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean, got {getattr(self, name)!r}")
        # bool is an int subclass; True is not a count
        for name in ("max_matches", "context"):
            value = getattr(self, name)
            if value is None and name == "max_matches":
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.max_matches is not None and self.max_matches < 0:
            raise ValueError(f"max_matches must be >= 0, got {self.max_matches}")
        if self.context < 0:
            raise ValueError(f"context must be >= 0, got {self.context}")

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> SearchOptions:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ValueError(f"unknown option(s): {', '.join(unknown)}")
        return cls(**payload)

    def to_json(self) -> dict[str, object]:
        payload = asdict(self)
        payload["unit"] = self.unit.value
        return payload


@dataclass(frozen=True)
class Match:
    start: int
    end: int
    offset: int | None = None


@dataclass
class SearchResult:
    needle: list[object]
    unit: Unit
    options: SearchOptions
    lps: list[int]
    matches: list[Match] = field(default_factory=list)
    haystack_length: int = 0
    truncated: bool = False

    @property
    def positions(self) -> list[int]:
        return [match.start for match in self.matches]

    def to_json(self) -> dict[str, object]:
        return {
            "needle": self.needle,
            "unit": self.unit.value,
            "options": self.options.to_json(),
            "lps": self.lps,
            "matches": [match.__dict__ for match in self.matches],
            "positions": self.positions,
            "haystack_length": self.haystack_length,
            "truncated": self.truncated,
        }
