# core/text_normalizer.py
from typing import Dict, List
from core.entities import NormalizedText

_CANONICAL: Dict[str, str] = {
    # single quotes, apostrophes, prime
    "‘": "'",
    "’": "'",
    "‚": "'",
    "‛": "'",
    "′": "'",
    # double quotes, double prime
    "“": '"',
    "”": '"',
    "„": '"',
    "‟": '"',
    "″": '"',
    # hyphen, non-breaking hyphen, figure/en/em dash, horizontal bar, minus
    "‐": "-",
    "‑": "-",
    "‒": "-",
    "–": "-",
    "—": "-",
    "―": "-",
    "−": "-",
}


def normalize(text: str, remove_whitespace: bool = False) -> NormalizedText:
    """
    Canonicalize `text` for loose comparison.

    - Typographic quotes and dashes fold to their ASCII form, everything else is lower-cased.
    - Whitespace runs collapse to one space (mapped to the run's first index),
      or are dropped when `remove_whitespace` is True.
    """
    out: List[str] = []
    offsets: List[int] = []
    in_space = False

    for i, ch in enumerate(text):
        if ch.isspace():
            if not remove_whitespace and not in_space:
                out.append(" ")
                offsets.append(i)
            in_space = True
            continue
        in_space = False
        folded = _CANONICAL.get(ch)
        if folded is None:
            folded = ch.lower()
        # lower() can expand one char (e.g. "İ"); every piece maps to the same source index
        out.append(folded)
        offsets.extend([i] * len(folded))

    return NormalizedText(normalized="".join(out), offset_map=tuple(offsets))
