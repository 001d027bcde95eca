# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    UNKNOWN_DOCUMENT = ErrorInfo("Unknown documentId", status.HTTP_404_NOT_FOUND)
    UNKNOWN_PAGE = ErrorInfo("Unknown page", status.HTTP_404_NOT_FOUND)
    FILE_NOT_FOUND = ErrorInfo("File not found", status.HTTP_404_NOT_FOUND)
    PDF_ONLY = ErrorInfo("Only PDF files are allowed", status.HTTP_400_BAD_REQUEST)
    UNREADABLE_PDF = ErrorInfo(
        "Could not read PDF", status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    UPSTREAM_ERROR = ErrorInfo("Upstream model error", status.HTTP_502_BAD_GATEWAY)
    INTERNAL_ERROR = ErrorInfo("Internal Error", status.HTTP_502_BAD_GATEWAY)
