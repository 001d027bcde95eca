# core/grounding_pipeline.py
import asyncio
from datetime import datetime, timezone
from config.settings import settings
from core.chunker import build_units
from core.citation_validator import validate_citations
from core.embeddings import embed
from core.llm_answerer import answer_question
from core.pdf_text import extract_pages
from core.retriever import top_k
from model.answer import Answer
from model.document import DocumentIndex, RetrievableUnit
from util.errors import EmbeddingCountMismatchError
import logging
from util.timing import timed

logger = logging.getLogger(__name__)


async def build_index_for_pdf(
    *, document_id: str, filename: str, file_bytes: bytes
) -> DocumentIndex:
    """
    Ingestion:
    1) Extract positioned text per page
    2) One unit per non-empty page
    3) Embed unit texts
    Returns the assembled DocumentIndex (persisting it is the caller's job).
    """
    with timed(logger, "ingest.pipeline", doc=document_id):
        pages = await asyncio.to_thread(extract_pages, file_bytes)
        raw_units = build_units(pages)
        vectors = await asyncio.to_thread(embed, [u.text for u in raw_units])
        if len(vectors) != len(raw_units):
            raise EmbeddingCountMismatchError(len(raw_units), len(vectors))

        index = DocumentIndex(
            documentId=document_id,
            filename=filename,
            createdAt=datetime.now(timezone.utc).isoformat(),
            pages=pages,
            units=[
                RetrievableUnit(id=u.id, page=u.page, text=u.text, embedding=v)
                for u, v in zip(raw_units, vectors)
            ],
        )
    logger.info(
        "ingest.ok doc=%s pages=%d units=%d", document_id, len(pages), len(index.units)
    )
    return index


async def answer_from_index(
    *,
    question: str,
    index: DocumentIndex,
    api_key: str,
    k: int = settings.RETRIEVAL_TOP_K,
) -> Answer:
    """
    Question time:
    1) Embed the question
    2) Retrieve top-k units
    3) Ask the model
    4) Drop any citation whose quote is not on its cited page
    """
    with timed(logger, "ask.pipeline", doc=index.documentId):
        vectors = await asyncio.to_thread(embed, [question])
        if len(vectors) != 1:
            raise EmbeddingCountMismatchError(1, len(vectors))

        with timed(logger, "ask.retrieve", k=k):
            context = top_k(index.units, vectors[0], k)

        candidate = await answer_question(
            api_key=api_key,
            model=settings.ANTHROPIC_MODEL,
            api_url=settings.ANTHROPIC_API_URL,
            question=question,
            units=context,
            timeout=settings.ANSWER_TIMEOUT_SECONDS,
        )
        grounded = validate_citations(candidate, index.pages)

    if candidate.citations and not grounded.citations:
        logger.warning(
            "ask.ungrounded doc=%s dropped=%d", index.documentId, len(candidate.citations)
        )
    return grounded
