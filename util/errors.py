# util/errors.py
from fastapi import HTTPException, status


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


class PipelineError(Exception):
    """Untrusted collaborator output rejected at the boundary where it is parsed."""


class DocumentParseError(PipelineError):
    pass


class EmbeddingCountMismatchError(PipelineError):
    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"expected {expected} embeddings, got {got}")
        self.expected = expected
        self.got = got


class MalformedAnswerError(PipelineError):
    pass
