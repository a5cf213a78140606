"""Command line interface for the kmpsearch tool."""
from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from . import __version__, io
from .demo import run_demo
from .engine.explain import explain_dict, explain_text, summarize_text
from .engine.lps import build_lps_table, lps_border_chain
from .engine.models import SearchOptions, Unit
from .engine.search import search_sequence, search_text
from .engine.tokens import normalize, split_text
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _non_negative(value: str) -> int:
    """Parse a non-negative integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kmpsearch", description="Exact sequence search with KMP")
    parser.add_argument("-V", "--version", action="version", version=f"kmpsearch {__version__}")
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING"
    )
    parser.add_argument("--log-file")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="find every occurrence of a needle")
    search.add_argument("--haystack")
    search.add_argument("--haystack-file")
    search.add_argument("--needle")
    search.add_argument("--needle-file")
    search.add_argument("--config", help="JSON file with default search options")
    search.add_argument("--unit", choices=[u.value for u in Unit])
    search.add_argument("--ignore-case", dest="ignore_case", action="store_true", default=None)
    search.add_argument("--no-overlap", dest="overlapping", action="store_false", default=None)
    search.add_argument("--max-matches", type=_non_negative)
    search.add_argument("--context", type=_non_negative)
    search.add_argument("--format", choices=["text", "json", "positions", "summary"], default="text")
    search.add_argument("--out", default="-")

    lps = sub.add_parser("lps", help="print the failure table of a needle")
    lps.add_argument("--needle", required=True)
    lps.add_argument("--unit", choices=[Unit.CHAR.value, Unit.WORD.value, Unit.LINE.value], default="char")
    lps.add_argument("--ignore-case", action="store_true", default=False)
    lps.add_argument("--format", choices=["text", "json"], default="text")

    sub.add_parser("demo", help="run the built-in examples")
    return parser


def _build_options(args: argparse.Namespace, items: bool) -> SearchOptions:
    """Merge the config file (if any) with explicit flags, flags winning."""
    params: dict[str, object] = io.load_config(args.config) if args.config else {}
    overrides = {
        "unit": args.unit,
        "ignore_case": args.ignore_case,
        "overlapping": args.overlapping,
        "max_matches": args.max_matches,
        "context": args.context,
    }
    params.update({key: value for key, value in overrides.items() if value is not None})
    if items:
        params["unit"] = Unit.ITEM
    return SearchOptions.from_dict(params)


def _command_search(args: argparse.Namespace) -> None:
    haystack = io.resolve_input(args.haystack, args.haystack_file, "haystack")
    needle = io.resolve_input(args.needle, args.needle_file, "needle")
    if haystack.is_text != needle.is_text:
        raise ValueError("haystack and needle must both be text or both be JSON arrays")
    options = _build_options(args, items=not haystack.is_text)
    if haystack.is_text:
        result = search_text(haystack.value, needle.value, options)
    else:
        result = search_sequence(haystack.value, needle.value, options)
    logger.info("%d match(es) for needle of %d element(s)", len(result.matches), len(result.needle))

    if args.format == "json":
        io.write_json(explain_dict(result, haystack.value), args.out)
    elif args.format == "positions":
        io.write_text(" ".join(str(pos) for pos in result.positions) + "\n", args.out)
    elif args.format == "summary":
        io.write_text(summarize_text(result) + "\n", args.out)
    else:
        io.write_text(explain_text(result, haystack.value) + "\n", args.out)


def _command_lps(args: argparse.Namespace) -> None:
    values = normalize([t.value for t in split_text(args.needle, args.unit)], args.ignore_case)
    table = build_lps_table(values)
    if args.format == "json":
        io.write_json({"needle": values, "lps": table}, "-")
        return
    lines = [f"{'k':>4}  {'element':<12} lps  fallback"]
    for k, value in enumerate(values):
        chain = " -> ".join(str(length) for length in lps_border_chain(table, k))
        lines.append(f"{k:>4}  {value!r:<12} {table[k]:>3}  {chain}")
    io.write_text("\n".join(lines) + "\n", "-")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    command = args.command
    if command == "search":
        _command_search(args)
    elif command == "lps":
        _command_lps(args)
    elif command == "demo":
        io.write_text(run_demo(), "-")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
