from __future__ import annotations

from util.functions import collapse_whitespace, split_windows


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("  a \n\t b  ") == "a b"
    assert collapse_whitespace(" \n ") == ""


def test_split_windows_packs_words_up_to_limit() -> None:
    windows = split_windows("one two three four five", max_chars=9)

    assert windows == ["one two", "three", "four five"]
    assert all(len(w) <= 9 for w in windows)


def test_split_windows_keeps_oversized_word_alone() -> None:
    assert split_windows("a supercalifragilistic b", max_chars=5) == [
        "a",
        "supercalifragilistic",
        "b",
    ]


def test_split_windows_short_and_empty_text() -> None:
    assert split_windows("short text", max_chars=100) == ["short text"]
    assert split_windows("   ", max_chars=100) == []
