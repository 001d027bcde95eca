# core/chunker.py
from typing import List, Sequence
import logging
from core.entities import RawUnit
from model.document import PageRecord
from util.functions import collapse_whitespace

logger = logging.getLogger(__name__)


def unit_id(page_number: int) -> str:
    return f"p{page_number}"


def build_units(pages: Sequence[PageRecord]) -> List[RawUnit]:
    """
    One retrievable unit per page with extractable text, in page order.
    Pages that collapse to nothing are skipped and can never be cited.
    """
    out: List[RawUnit] = []
    for page in pages:
        text = collapse_whitespace(page.text)
        if not text:
            continue
        out.append(RawUnit(id=unit_id(page.pageNumber), page=page.pageNumber, text=text))
    logger.info("chunk.units pages=%d units=%d", len(pages), len(out))
    return out
