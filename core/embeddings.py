# core/embeddings.py
from functools import lru_cache
from typing import List, Sequence
import numpy as np
from sentence_transformers import SentenceTransformer
from config.settings import settings
from util.functions import split_windows
from util.timing import timed
import logging

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _load_model() -> SentenceTransformer:
    """
    Lazy-load the sentence embedding model once per process.

    CPU-only by default; choose another model via EMBEDDING_MODEL_NAME.
    """
    name = settings.EMBEDDING_MODEL_NAME
    with timed(logger, "embed.model.load", model=name):
        model = SentenceTransformer(name, device="cpu")
    return model


def embed(texts: Sequence[str]) -> List[List[float]]:
    """
    Encode `texts` into L2-normalized vectors, same order and count as the input.
    Empty input returns [] without touching the model.

    Each text is encoded in windows of EMBEDDING_WINDOW_CHARS so a long page is not
    silently cut at the model's sequence limit; window vectors are mean-pooled and
    re-normalized into one vector per text.
    """
    if not texts:
        return []

    windows: List[str] = []
    owners: List[int] = []
    for i, text in enumerate(texts):
        parts = split_windows(text, settings.EMBEDDING_WINDOW_CHARS) or [text]
        windows.extend(parts)
        owners.extend([i] * len(parts))

    model = _load_model()
    with timed(
        logger,
        "embed.encode",
        n=len(texts),
        windows=len(windows),
        batch=settings.EMBEDDING_BATCH_SIZE,
    ):
        vecs = model.encode(
            windows,
            batch_size=settings.EMBEDDING_BATCH_SIZE,
            convert_to_numpy=True,
            normalize_embeddings=True,
        )
    win = np.asarray(vecs, dtype=np.float32)

    pooled = np.zeros((len(texts), win.shape[1]), dtype=np.float32)
    counts = np.zeros(len(texts), dtype=np.float32)
    np.add.at(pooled, owners, win)
    np.add.at(counts, owners, 1.0)
    pooled /= counts[:, None]
    norms = np.linalg.norm(pooled, axis=1, keepdims=True)
    pooled = np.divide(pooled, norms, out=np.zeros_like(pooled), where=norms > 0)

    logger.info("embed.vectors n=%d windows=%d d=%d", len(texts), len(windows), pooled.shape[1])
    return pooled.tolist()
