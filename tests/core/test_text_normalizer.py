from __future__ import annotations

import pytest

from core.text_normalizer import normalize


def test_folds_typographic_quotes_and_dashes() -> None:
    result = normalize("“Don’t” — stop – now ‒ here ― end")

    assert result.normalized == "\"don't\" - stop - now - here - end"


def test_lowercases_other_characters() -> None:
    assert normalize("HbA1c LEVEL").normalized == "hba1c level"


def test_collapses_whitespace_runs_to_first_index() -> None:
    result = normalize("a \t\n b")

    assert result.normalized == "a b"
    assert result.offset_map == (0, 1, 5)


def test_remove_whitespace_drops_spaces_without_offsets() -> None:
    result = normalize(" a  b\nc ", remove_whitespace=True)

    assert result.normalized == "abc"
    assert result.offset_map == (1, 4, 6)


def test_expanding_lowercase_maps_every_piece_to_same_source() -> None:
    result = normalize("xİy")

    assert result.normalized == "x" + "İ".lower() + "y"
    assert result.offset_map[0] == 0
    assert set(result.offset_map[1:-1]) == {1}
    assert result.offset_map[-1] == 2


@pytest.mark.parametrize(
    "source",
    [
        "Patient has type 2 diabetes.\nFollow up in 3 months.",
        "  “Quoted”   text — with  DASHES  ",
        "Blood pressure: 120/80 mmHg",
        "",
        "   ",
    ],
)
def test_normalization_is_idempotent(source: str) -> None:
    once = normalize(source).normalized
    twice = normalize(once).normalized

    assert once == twice


_TYPOGRAPHIC = [chr(cp) for cp in range(0x2010, 0x2028)] + [
    chr(cp) for cp in (0x2032, 0x2033, 0x2212, 0x00AD, 0xFE58, 0xFF0D)
]
_CASE_EXPANDING = ["İ", "ẞ", "ß", "Σ", "ς", "ﬁ", "ŉ", "Ǆ", "ǅ", "ΐ", "K", "Å"]


@pytest.mark.parametrize("ch", _TYPOGRAPHIC + _CASE_EXPANDING)
def test_single_character_normalization_is_idempotent(ch: str) -> None:
    for source in (ch, f"A{ch}b", f" {ch} {ch}{ch} "):
        once = normalize(source).normalized
        assert normalize(once).normalized == once


def _printable_blocks(size: int = 512) -> list[str]:
    chars = [chr(cp) for cp in range(0x20, 0x3100) if chr(cp).isprintable()]
    return ["".join(chars[i : i + size]) for i in range(0, len(chars), size)]


@pytest.mark.parametrize("block", _printable_blocks())
def test_printable_sweep_is_idempotent(block: str) -> None:
    once = normalize(block).normalized
    assert normalize(once).normalized == once


@pytest.mark.parametrize("ch", _TYPOGRAPHIC[:6] + ["‘", "’", "‚", "‛", "“", "”", "„", "‟", "′", "″", "−"])
def test_typographic_marks_fold_to_ascii(ch: str) -> None:
    assert normalize(ch).normalized in {"-", "'", '"'}


@pytest.mark.parametrize(
    "source",
    [
        "Patient  has\ttype 2 diabetes.",
        "“Smart” quotes — and dashes",
        "ALL CAPS\n\nTWO PARAGRAPHS",
    ],
)
def test_offset_map_recovers_original_slices(source: str) -> None:
    norm = normalize(source)

    for start in range(len(norm.normalized)):
        for end in range(start + 1, len(norm.normalized) + 1):
            piece = norm.normalized[start:end]
            if piece != piece.strip():
                continue
            original = source[norm.offset_map[start] : norm.offset_map[end - 1] + 1]
            assert normalize(original).normalized == piece
