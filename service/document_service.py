# service/document_service.py
import logging
from typing import NoReturn
from uuid import uuid4
import httpx
from fastapi import UploadFile
from core.grounding_pipeline import answer_from_index, build_index_for_pdf
from core.span_highlighter import highlight_boxes, highlighted_indexes_for_page
from model.answer import Answer
from model.api import HighlightBox, HighlightRequest, HighlightResponse
from model.document import DocumentIndex
from repository.blob_repository import BlobRepository
from repository.index_repository import IndexRepository
from util.enums import ErrorMessage
from util.errors import AppError, DocumentParseError, PipelineError

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"


def _raise(err: ErrorMessage) -> NoReturn:
    raise AppError(err.value.message, err.value.http_status)


class DocumentService:
    def __init__(self, indexes: IndexRepository, blobs: BlobRepository) -> None:
        self._indexes = indexes
        self._blobs = blobs

    async def _require_index(self, document_id: str) -> DocumentIndex:
        index = await self._indexes.get(document_id)
        if index is None:
            logger.warning("doc.index.missing doc=%s", document_id)
            _raise(ErrorMessage.UNKNOWN_DOCUMENT)
        return index

    async def create_document(self, file: UploadFile) -> str:
        """
        Persist the PDF, build its index and store it.
        Logs: document id, byte size and counts (no payloads).
        """
        if (file.content_type or "").lower() != PDF_MEDIA_TYPE:
            logger.warning("upload.reject content_type=%s", file.content_type)
            _raise(ErrorMessage.PDF_ONLY)

        data = await file.read()
        await file.seek(0)
        document_id = str(uuid4())

        # A blob without an index is unreachable, so any failure below removes it
        await self._blobs.put_pdf(document_id, data)
        try:
            index = await build_index_for_pdf(
                document_id=document_id,
                filename=file.filename or "document.pdf",
                file_bytes=data,
            )
            await self._indexes.put(index)
        except DocumentParseError:
            await self._blobs.delete(document_id)
            _raise(ErrorMessage.UNREADABLE_PDF)
        except PipelineError:
            logger.error("upload.index.error doc=%s", document_id, exc_info=True)
            await self._blobs.delete(document_id)
            _raise(ErrorMessage.INTERNAL_ERROR)
        except Exception:
            logger.error("upload.error doc=%s", document_id, exc_info=True)
            await self._blobs.delete(document_id)
            raise

        logger.info("upload.ok doc=%s bytes=%d", document_id, len(data))
        return document_id

    async def ask(self, document_id: str, question: str, api_key: str) -> Answer:
        """
        Answer from the stored index. Zero surviving citations is a normal
        outcome ("insufficient grounding"), not an error.
        """
        index = await self._require_index(document_id)
        try:
            answer = await answer_from_index(question=question, index=index, api_key=api_key)
        except (PipelineError, httpx.HTTPError) as e:
            logger.error("ask.error doc=%s err=%s", document_id, type(e).__name__)
            raise AppError(
                ErrorMessage.UPSTREAM_ERROR.value.message,
                ErrorMessage.UPSTREAM_ERROR.value.http_status,
            ) from e
        logger.info("ask.ok doc=%s citations=%d", document_id, len(answer.citations))
        return answer

    async def get_file(self, document_id: str) -> bytes:
        pdf = await self._blobs.get_pdf(document_id)
        if not pdf:
            _raise(ErrorMessage.FILE_NOT_FOUND)
        return pdf

    async def highlight(self, req: HighlightRequest) -> HighlightResponse:
        """
        Fragment indexes (and their boxes) to highlight on one page for the
        given citations, computed against the page's positioned fragments.
        """
        index = await self._require_index(req.documentId)
        page = index.page(req.page)
        if page is None:
            _raise(ErrorMessage.UNKNOWN_PAGE)

        selected = highlighted_indexes_for_page(page.fragments, req.citations, req.page)
        boxes = [
            HighlightBox(index=i, x=f.x, y=f.y, width=f.width, height=f.height)
            for i, f in highlight_boxes(page.fragments, selected)
        ]
        logger.info(
            "highlight.ok doc=%s page=%d citations=%d fragments=%d",
            req.documentId,
            req.page,
            len(req.citations),
            len(boxes),
        )
        return HighlightResponse(
            page=req.page, fragmentIndexes=[b.index for b in boxes], boxes=boxes
        )
