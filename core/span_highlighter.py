# core/span_highlighter.py
from typing import Iterable, List, Sequence, Set, Tuple
from core.entities import TextRange
from core.fuzzy_locator import locate
from model.answer import Citation
from model.document import PositionedFragment


def fragment_offsets(fragments: Sequence[PositionedFragment]) -> List[TextRange]:
    """Range each fragment occupies in the concatenation of all fragment texts."""
    out: List[TextRange] = []
    offset = 0
    for frag in fragments:
        out.append(TextRange(start=offset, end=offset + len(frag.text)))
        offset += len(frag.text)
    return out


def highlighted_indexes(fragments: Sequence[PositionedFragment], quote: str) -> Set[int]:
    """
    Indexes of the fragments that overlap where `quote` sits in the page's
    on-screen text. Empty when the quote cannot be located.
    """
    raw = "".join(f.text for f in fragments)
    match = locate(raw, quote)
    if match is None:
        return set()
    return {i for i, rng in enumerate(fragment_offsets(fragments)) if rng.overlaps(match)}


def highlighted_indexes_for_page(
    fragments: Sequence[PositionedFragment],
    citations: Iterable[Citation],
    page_number: int,
) -> Set[int]:
    """Union of highlighted fragments for every citation that points at `page_number`."""
    merged: Set[int] = set()
    for citation in citations:
        if citation.page != page_number:
            continue
        merged |= highlighted_indexes(fragments, citation.quote)
    return merged


def highlight_boxes(
    fragments: Sequence[PositionedFragment], indexes: Iterable[int]
) -> List[Tuple[int, PositionedFragment]]:
    return [(i, fragments[i]) for i in sorted(indexes) if 0 <= i < len(fragments)]
