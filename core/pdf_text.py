# core/pdf_text.py
from typing import List
import fitz
from model.document import PageRecord, PositionedFragment
from util.errors import DocumentParseError
from util.timing import timed
import logging

logger = logging.getLogger(__name__)


def _page_fragments(page: "fitz.Page") -> List[PositionedFragment]:
    """
    Text spans of one page in reading order (blocks -> lines -> spans),
    geometry taken from each span's bbox in page points, origin top-left.
    """
    out: List[PositionedFragment] = []
    layout = page.get_text("dict", sort=False)
    for block in layout.get("blocks", []):
        if block.get("type") != 0:  # image block
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text") or ""
                if not text:
                    continue
                x0, y0, x1, y1 = span["bbox"]
                out.append(
                    PositionedFragment(
                        text=text,
                        x=float(x0),
                        y=float(y0),
                        width=float(x1 - x0),
                        height=float(y1 - y0),
                    )
                )
    return out


def extract_pages(file_bytes: bytes) -> List[PageRecord]:
    """
    Return one PageRecord per page (1-based, contiguous).
    Page text is the fragment texts joined without separators, the same assembly
    the viewer uses, so quotes can be located against either copy.
    Raises DocumentParseError when the bytes are not a readable PDF.
    """
    try:
        out: List[PageRecord] = []
        with timed(logger, "pdf.open"):
            doc = fitz.open(stream=file_bytes, filetype="pdf")
        with doc:
            with timed(logger, "pdf.parse", pages=doc.page_count):
                for i in range(doc.page_count):
                    fragments = _page_fragments(doc.load_page(i))
                    out.append(
                        PageRecord(
                            pageNumber=i + 1,
                            text="".join(f.text for f in fragments),
                            fragments=fragments,
                        )
                    )
    except Exception as e:
        # do not log payloads
        logger.error("pdf.parse.error err=%s", type(e).__name__)
        raise DocumentParseError("could not read PDF") from e
    logger.info("pdf.pages count=%d", len(out))
    return out
