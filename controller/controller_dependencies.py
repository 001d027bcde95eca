# controller/controller_dependencies.py
from fastapi import File, HTTPException, Request, UploadFile
from config.settings import settings
from repository.blob_repository import BlobRepository
from repository.index_repository import IndexRepository
from service.document_service import DocumentService


def get_document_service() -> DocumentService:
    return DocumentService(IndexRepository(), BlobRepository())


def _too_large() -> HTTPException:
    return HTTPException(
        status_code=413,
        detail={
            "ok": False,
            "error": "file_too_large",
            "maxMb": settings.MAX_FILE_MB,
        },
    )


async def enforce_max_upload_size(
    request: Request, file: UploadFile = File(...)
) -> UploadFile:
    max_bytes = settings.MAX_FILE_MB * 1024 * 1024

    # Fast pre-check via Content-Length if present
    cl = request.headers.get("content-length")
    if cl and cl.isdigit() and int(cl) > max_bytes:
        raise _too_large()

    # Hard cap while reading (works even without Content-Length)
    blob = await file.read(max_bytes + 1)
    if len(blob) > max_bytes:
        raise _too_large()

    await file.seek(0)
    return file
