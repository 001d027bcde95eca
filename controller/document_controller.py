# controller/document_controller.py
from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response
from fastapi_limiter.depends import RateLimiter
from config.settings import settings
from model.api import (
    AskRequest,
    AskResponse,
    HighlightRequest,
    HighlightResponse,
    UploadDocumentResponse,
)
from service.document_service import DocumentService
from util.constants import InternalURIs
from controller.controller_dependencies import (
    enforce_max_upload_size,
    get_document_service,
)

rate_limiter = RateLimiter(
    times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS
)

document_router = APIRouter(dependencies=[Depends(rate_limiter)])


@document_router.post(
    InternalURIs.UPLOAD,
    response_model=UploadDocumentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(enforce_max_upload_size)],
)
async def upload_document(
    file: UploadFile = File(...),
    service: DocumentService = Depends(get_document_service),
) -> UploadDocumentResponse:
    document_id = await service.create_document(file)
    return UploadDocumentResponse(documentId=document_id)


@document_router.post(InternalURIs.ASK, response_model=AskResponse)
async def ask(
    payload: AskRequest,
    service: DocumentService = Depends(get_document_service),
) -> AskResponse:
    answer = await service.ask(payload.documentId, payload.question, payload.apiKey)
    return AskResponse(answer=answer.answer, citations=answer.citations)


@document_router.get(InternalURIs.FILE)
async def get_file(
    documentId: str,
    service: DocumentService = Depends(get_document_service),
) -> Response:
    pdf = await service.get_file(documentId)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"cache-control": "no-store"},
    )


@document_router.post(InternalURIs.HIGHLIGHT, response_model=HighlightResponse)
async def highlight(
    payload: HighlightRequest,
    service: DocumentService = Depends(get_document_service),
) -> HighlightResponse:
    return await service.highlight(payload)
