# core/citation_validator.py
from typing import Dict, List, Sequence
import logging
from core.fuzzy_locator import locate
from model.answer import Answer, Citation
from model.document import PageRecord

logger = logging.getLogger(__name__)


def validate_citations(answer: Answer, pages: Sequence[PageRecord]) -> Answer:
    """
    Keep only citations whose quote can be located (loosely) in the text of the
    page they cite. Surviving citations are returned untouched; the answer text
    is never modified. A citation that fails is dropped, not raised.
    """
    by_page: Dict[int, str] = {p.pageNumber: p.text for p in pages}
    kept: List[Citation] = []
    missing_page = 0
    not_found = 0

    for citation in answer.citations:
        page_text = by_page.get(citation.page)
        if page_text is None:
            missing_page += 1
            continue
        if locate(page_text, citation.quote) is None:
            not_found += 1
            continue
        kept.append(citation)

    logger.info(
        "cite.validate total=%d kept=%d missing_page=%d not_found=%d",
        len(answer.citations),
        len(kept),
        missing_page,
        not_found,
    )
    return Answer(answer=answer.answer, citations=kept)
