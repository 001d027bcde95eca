# model/document.py
from pydantic import BaseModel, ConfigDict, Field


class PositionedFragment(BaseModel):
    """One run of text on a rendered page, in page-relative coordinates."""

    model_config = ConfigDict(frozen=True)

    text: str
    x: float
    y: float
    width: float
    height: float


class PageRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    pageNumber: int = Field(ge=1)
    text: str  # fragment texts joined in reading order, no separator
    fragments: list[PositionedFragment] = Field(default_factory=list)


class RetrievableUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    page: int = Field(ge=1)
    text: str
    embedding: list[float] = Field(default_factory=list)


class DocumentIndex(BaseModel):
    """
    Everything known about one ingested document.
    Stored whole under its documentId; re-ingestion replaces the record.
    """

    model_config = ConfigDict(frozen=True)

    documentId: str
    filename: str
    createdAt: str
    pages: list[PageRecord] = Field(default_factory=list)
    units: list[RetrievableUnit] = Field(default_factory=list)

    def page(self, page_number: int) -> PageRecord | None:
        return next((p for p in self.pages if p.pageNumber == page_number), None)
