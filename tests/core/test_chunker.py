from __future__ import annotations

from core.chunker import build_units
from model.document import PageRecord


def _page(number: int, text: str) -> PageRecord:
    return PageRecord(pageNumber=number, text=text, fragments=[])


def test_one_unit_per_non_empty_page_in_order() -> None:
    pages = [
        _page(1, "Intro   text\n\nhere"),
        _page(2, "   \n\t"),
        _page(3, ""),
        _page(4, " Last page. "),
    ]

    units = build_units(pages)

    assert [(u.id, u.page, u.text) for u in units] == [
        ("p1", 1, "Intro text here"),
        ("p4", 4, "Last page."),
    ]


def test_no_pages_yields_no_units() -> None:
    assert build_units([]) == []
