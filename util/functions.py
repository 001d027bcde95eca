# util/functions.py
import re
from typing import List

_WS_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """
    - Replace every whitespace run in `text` with a single space.
    - Strip leading/trailing whitespace.
    """
    return _WS_RUN.sub(" ", text).strip()


def split_windows(text: str, max_chars: int = 1000) -> List[str]:
    """
    Greedy word packing: consecutive words joined by single spaces, each window
    at most `max_chars` long. A single word longer than `max_chars` gets its own window.
    """
    words = text.split()
    if not words:
        return []
    windows: List[str] = []
    buf: List[str] = []
    size = 0
    for w in words:
        if buf and size + len(w) + 1 > max_chars:
            windows.append(" ".join(buf))
            buf = [w]
            size = len(w)
        else:
            size += len(w) + (1 if buf else 0)
            buf.append(w)
    if buf:
        windows.append(" ".join(buf))
    return windows
