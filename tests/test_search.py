"""Tests for the high-level search entry points."""

import pytest

from kmpsearch import SearchOptions, Unit, search_sequence, search_text


def test_search_text_characters() -> None:
    result = search_text("abababa", "aba")
    assert result.positions == [0, 2, 4]
    assert [m.offset for m in result.matches] == [0, 2, 4]
    assert [m.end for m in result.matches] == [3, 5, 7]
    assert result.lps == [0, 0, 1]
    assert result.haystack_length == 7
    assert result.truncated is False


def test_search_text_words_maps_offsets() -> None:
    result = search_text("to be or not to be", "to be", unit="word")
    assert result.positions == [0, 4]
    assert [m.offset for m in result.matches] == [0, 13]
    assert result.needle == ["to", "be"]


def test_search_text_lines() -> None:
    text = "alpha\nbeta\ngamma\nbeta\n"
    result = search_text(text, "beta", SearchOptions(unit=Unit.LINE))
    assert result.positions == [1, 3]
    assert [m.offset for m in result.matches] == [6, 17]


def test_search_text_ignore_case() -> None:
    result = search_text("Hello HELLO hello", "hello", unit="word", ignore_case=True)
    assert result.positions == [0, 1, 2]
    assert search_text("Hello HELLO hello", "hello", unit="word").positions == [2]


def test_search_text_non_overlapping() -> None:
    assert search_text("aaaaa", "aa", overlapping=False).positions == [0, 2]


def test_max_matches_truncates() -> None:
    result = search_text("aaaaa", "a", max_matches=2)
    assert result.positions == [0, 1]
    assert result.truncated is True
    exact = search_text("aaaaa", "a", max_matches=5)
    assert len(exact.matches) == 5
    assert exact.truncated is False


def test_keyword_overrides_merge_with_options() -> None:
    result = search_text("A a", "a", SearchOptions(unit="word"), ignore_case=True)
    assert result.options.unit is Unit.WORD
    assert result.positions == [0, 1]


def test_search_text_rejects_item_unit() -> None:
    with pytest.raises(ValueError):
        search_text("abc", "b", unit="item")


def test_search_sequence() -> None:
    haystack = [1, 2, 3, 1, 2, 4, 5, 1, 2, 3, 1, 2, 3, 5]
    result = search_sequence(haystack, [1, 2, 3, 5])
    assert result.positions == [10]
    assert result.unit is Unit.ITEM
    assert result.matches[0].offset is None
    assert result.matches[0].end == 14


def test_search_sequence_options_report_item_unit() -> None:
    result = search_sequence([1, 2, 1, 2], [1, 2], SearchOptions(unit="word"))
    assert result.options.unit is Unit.ITEM
    payload = result.to_json()
    assert payload["unit"] == payload["options"]["unit"] == "item"
    assert search_sequence([1, 2], [2]).options.unit is Unit.ITEM


@pytest.mark.parametrize(
    "haystack,needle",
    [("abc", ""), ("", "a"), ("ab", "abc")],
)
def test_degenerate_inputs_give_empty_results(haystack: str, needle: str) -> None:
    result = search_text(haystack, needle)
    assert result.positions == []
    assert result.truncated is False
