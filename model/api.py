# model/api.py
from pydantic import BaseModel, Field
from model.answer import Citation


class UploadDocumentResponse(BaseModel):
    documentId: str


class AskRequest(BaseModel):
    documentId: str = Field(min_length=1)
    question: str = Field(min_length=3, max_length=2000)
    apiKey: str = Field(min_length=1)


class AskResponse(BaseModel):
    answer: str
    citations: list[Citation]


class HighlightRequest(BaseModel):
    documentId: str = Field(min_length=1)
    page: int = Field(ge=1)
    citations: list[Citation] = Field(default_factory=list)


class HighlightBox(BaseModel):
    index: int
    x: float
    y: float
    width: float
    height: float


class HighlightResponse(BaseModel):
    page: int
    fragmentIndexes: list[int]
    boxes: list[HighlightBox]
