# model/answer.py
from pydantic import BaseModel, Field


class Citation(BaseModel):
    page: int = Field(ge=1)
    quote: str = Field(min_length=1)
    confidence: float = Field(ge=0.0, le=1.0)


class Answer(BaseModel):
    """
    Candidate or validated answer. Citations coming from the answering model are
    untrusted until they pass core.citation_validator.validate_citations.
    """

    answer: str = Field(min_length=1)
    citations: list[Citation] = Field(default_factory=list)
