# core/fuzzy_locator.py
from typing import Optional
from core.entities import NormalizedText, TextRange
from core.text_normalizer import normalize


def _to_original(norm: NormalizedText, start: int, length: int) -> TextRange:
    return TextRange(
        start=norm.offset_map[start],
        end=norm.offset_map[start + length - 1] + 1,
    )


def locate(haystack: str, quote: str) -> Optional[TextRange]:
    """
    Find `quote` in `haystack`, ignoring case, typographic quote/dash variants and
    whitespace differences. Returns the half-open range of the leftmost match in
    `haystack` coordinates, or None.

    Pass 1 compares with whitespace runs collapsed. Pass 2 drops whitespace
    entirely, which recovers text whose extractor inserted or lost spaces at
    fragment boundaries.
    """
    if not haystack or not quote:
        return None

    hay = normalize(haystack)
    probe = normalize(quote).normalized.strip()
    if not probe:
        return None

    at = hay.normalized.find(probe)
    if at != -1:
        return _to_original(hay, at, len(probe))

    hay_compact = normalize(haystack, remove_whitespace=True)
    probe_compact = normalize(quote, remove_whitespace=True).normalized
    if not probe_compact:
        return None
    at = hay_compact.normalized.find(probe_compact)
    if at != -1:
        return _to_original(hay_compact, at, len(probe_compact))
    return None
