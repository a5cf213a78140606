"""Tests for :mod:`kmpsearch.io`."""

import json
from pathlib import Path

import pytest

from kmpsearch import io


def test_read_input_text_and_json(tmp_path: Path) -> None:
    text_path = tmp_path / "haystack.txt"
    text_path.write_text("abc\ndef\n", encoding="utf-8")
    assert io.read_input(str(text_path)) == io.SearchInput("abc\ndef\n")

    json_path = tmp_path / "haystack.json"
    json_path.write_text(json.dumps([1, "a", None]))
    data = io.read_input(str(json_path))
    assert data.value == [1, "a", None]
    assert not data.is_text

    wrapped = tmp_path / "wrapped.JSON"
    wrapped.write_text(json.dumps({"items": [1, 2]}))
    assert io.read_input(str(wrapped)).value == [1, 2]


def test_read_input_rejects_non_array_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"values": [1]}))
    with pytest.raises(ValueError, match="array"):
        io.read_input(str(path))


def test_resolve_input(tmp_path: Path) -> None:
    assert io.resolve_input("abc", None, "needle").value == "abc"
    assert io.resolve_input("", None, "needle").value == ""
    with pytest.raises(ValueError, match="not both"):
        io.resolve_input("abc", str(tmp_path / "x.txt"), "needle")
    with pytest.raises(ValueError, match="required"):
        io.resolve_input(None, None, "needle")


def test_load_config(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"unit": "word"}))
    assert io.load_config(str(path)) == {"unit": "word"}
    path.write_text(json.dumps(["word"]))
    with pytest.raises(ValueError):
        io.load_config(str(path))


def test_write_helpers(tmp_path: Path) -> None:
    text_out = tmp_path / "out.txt"
    io.write_text("hello\n", str(text_out))
    assert text_out.read_text() == "hello\n"
    json_out = tmp_path / "out.json"
    io.write_json({"b": 1, "a": [2]}, str(json_out))
    assert json.loads(json_out.read_text()) == {"a": [2], "b": 1}


def test_write_helpers_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    io.write_text("no newline", "-")
    io.write_json({"positions": [0, 2]}, "-")
    out = capsys.readouterr().out
    assert out.startswith("no newline\n")
    assert json.loads(out[len("no newline\n"):]) == {"positions": [0, 2]}
