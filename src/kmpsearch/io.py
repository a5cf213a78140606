"""Input/output helpers for the kmpsearch CLI."""
import json
import os
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchInput:
    """A haystack or needle as read from the command line or a file."""

    value: str | list[object]

    @property
    def is_text(self) -> bool:
        return isinstance(self.value, str)


def _read_json_items(path: str) -> list[object]:
    with open(path, encoding="utf-8") as handle:
        payload = json.load(handle)
    if isinstance(payload, dict) and "items" in payload:
        payload = payload["items"]
    if not isinstance(payload, list):
        raise ValueError(f"{path}: JSON input must be an array or an object with an 'items' key")
    return payload


def read_input(path: str) -> SearchInput:
    """Read ``path`` as a JSON array (``.json``) or as UTF-8 text."""
    _, ext = os.path.splitext(path)
    if ext.lower() == ".json":
        return SearchInput(_read_json_items(path))
    with open(path, encoding="utf-8") as handle:
        return SearchInput(handle.read())


def resolve_input(literal: str | None, path: str | None, name: str) -> SearchInput:
    if literal is not None and path is not None:
        raise ValueError(f"give either --{name} or --{name}-file, not both")
    if path is not None:
        return read_input(path)
    if literal is None:
        raise ValueError(f"one of --{name} or --{name}-file is required")
    return SearchInput(literal)


def load_config(path: str) -> dict:
    with open(path, encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{path}: config must be a JSON object")
    return payload


def write_json(obj: object, path: str) -> None:
    if path == "-":
        json.dump(obj, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
