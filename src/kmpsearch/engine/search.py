"""High-level search entry points honoring :class:`SearchOptions`."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from itertools import islice

from .lps import build_lps_table
from .models import Match, SearchOptions, SearchResult, Unit
from .scanner import iter_occurrences
from .tokens import Token, normalize, split_text

logger = logging.getLogger(__name__)


def _resolve_options(options: SearchOptions | None, kwargs: dict[str, object]) -> SearchOptions:
    if options is None:
        return SearchOptions(**kwargs)
    if kwargs:
        params = options.to_json()
        params.update(kwargs)
        return SearchOptions(**params)
    return options


def _scan(
    haystack: Sequence[object], needle: Sequence[object], options: SearchOptions
) -> tuple[list[int], list[int], bool]:
    hay_keys = normalize(haystack, options.ignore_case)
    needle_keys = normalize(needle, options.ignore_case)
    table = build_lps_table(needle_keys)
    found = iter_occurrences(hay_keys, needle_keys, table, options.overlapping)
    if options.max_matches is None:
        return table, list(found), False
    starts = list(islice(found, options.max_matches))
    # one more occurrence means the limit cut the scan short
    truncated = next(found, None) is not None
    return table, starts, truncated


def search_sequence(
    haystack: Sequence[object],
    needle: Sequence[object],
    options: SearchOptions | None = None,
    **kwargs: object,
) -> SearchResult:
    """Search an already-split ``haystack`` for ``needle``.

    Elements are compared with ``==``; offsets are not tracked, so every
    :class:`Match` has ``offset=None``.
    """
    # sequences are searched item by item whatever unit the options carry
    opts = replace(_resolve_options(options, kwargs), unit=Unit.ITEM)
    table, starts, truncated = _scan(haystack, needle, opts)
    m = len(needle)
    logger.debug("needle of %d items, lps=%s, %d match(es)", m, table, len(starts))
    return SearchResult(
        needle=list(needle),
        unit=Unit.ITEM,
        options=opts,
        lps=table,
        matches=[Match(start, start + m) for start in starts],
        haystack_length=len(haystack),
        truncated=truncated,
    )


def search_text(
    haystack: str,
    needle: str,
    options: SearchOptions | None = None,
    **kwargs: object,
) -> SearchResult:
    """Search ``haystack`` text for ``needle`` text split with ``options.unit``.

    Each :class:`Match` carries element indices and the character offset of
    its first element in ``haystack``.

    Examples:
        >>> search_text("abababa", "aba").positions
        [0, 2, 4]
        >>> [m.offset for m in search_text("to be or not to be", "to be", unit="word").matches]
        [0, 13]
    """
    opts = _resolve_options(options, kwargs)
    if opts.unit is Unit.ITEM:
        raise ValueError("search_text needs a text unit; use search_sequence for items")
    hay_tokens: list[Token] = split_text(haystack, opts.unit)
    needle_values = [token.value for token in split_text(needle, opts.unit)]
    table, starts, truncated = _scan([t.value for t in hay_tokens], needle_values, opts)
    m = len(needle_values)
    logger.debug(
        "%s search: %d needle element(s) over %d, lps=%s, %d match(es)%s",
        opts.unit.value,
        m,
        len(hay_tokens),
        table,
        len(starts),
        " (truncated)" if truncated else "",
    )
    return SearchResult(
        needle=needle_values,
        unit=opts.unit,
        options=opts,
        lps=table,
        matches=[Match(start, start + m, hay_tokens[start].offset) for start in starts],
        haystack_length=len(hay_tokens),
        truncated=truncated,
    )
