# core/entities.py
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class NormalizedText:
    """
    Comparison form of a string plus, for every normalized character,
    the index of the original character that produced it.
    """

    normalized: str
    offset_map: Tuple[int, ...]


@dataclass(frozen=True)
class TextRange:
    start: int  # inclusive
    end: int  # exclusive

    def overlaps(self, other: "TextRange") -> bool:
        return self.start < other.end and self.end > other.start


@dataclass(frozen=True)
class RawUnit:
    id: str
    page: int  # 1-based page number
    text: str
