# core/retriever.py
from typing import List, Sequence
import logging
import numpy as np
from model.document import RetrievableUnit

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine of the angle between `a` and `b`.
    Empty, zero-magnitude or length-mismatched vectors score 0.0.
    """
    if len(a) == 0 or len(a) != len(b):
        return 0.0
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    denom = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if denom == 0.0 or not np.isfinite(denom):
        return 0.0
    sim = float(np.dot(va, vb) / denom)
    return sim if np.isfinite(sim) else 0.0


def top_k(
    units: Sequence[RetrievableUnit], query_vector: Sequence[float], k: int
) -> List[RetrievableUnit]:
    """
    Return up to `k` units ordered by cosine similarity to `query_vector`, best first.
    Equal scores keep their input order.
    """
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")
    scored = [(cosine_similarity(u.embedding, query_vector), u) for u in units]
    # sorted() is stable, so ties stay in unit order
    ranked = sorted(scored, key=lambda t: t[0], reverse=True)
    out = [u for _, u in ranked[:k]]
    if out:
        logger.info(
            "retrieve.topk units=%d k=%d best=%.3f", len(units), len(out), ranked[0][0]
        )
    else:
        logger.info("retrieve.topk units=0 k=%d", k)
    return out
