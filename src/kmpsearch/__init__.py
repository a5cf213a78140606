"""kmpsearch: exact sequence search with the Knuth-Morris-Pratt algorithm."""

from collections.abc import Sequence

__version__ = "1.0.0"

from .engine.lps import build_lps_table
from .engine.models import Match, SearchOptions, SearchResult, Unit
from .engine.scanner import (
    KMPMatcher,
    contains,
    count_occurrences,
    find_all_occurrences,
    find_first,
    iter_occurrences,
)
from .engine.search import search_sequence, search_text


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`kmpsearch.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "__version__",
    "main",
    "build_lps_table",
    "find_all_occurrences",
    "iter_occurrences",
    "find_first",
    "count_occurrences",
    "contains",
    "KMPMatcher",
    "search_text",
    "search_sequence",
    "SearchOptions",
    "SearchResult",
    "Match",
    "Unit",
]
