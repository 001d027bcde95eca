# repository/index_repository.py
from typing import Final, Optional
import logging
from pydantic import ValidationError
from redis.asyncio import Redis
from config.cache import get_redis
from config.settings import settings
from model.document import DocumentIndex
from repository.namespaces import INDEXES

KEY_PREFIX: Final[str] = INDEXES
logger = logging.getLogger(__name__)


class IndexRepository:
    """
    Flow:
    - put() writes the whole DocumentIndex as one JSON value; a second put for
      the same documentId replaces it (last writer wins, no partial updates).
    - get() returns None for unknown, expired or undecodable records.
    - TTL is refreshed on read so an index survives while questions keep coming.
    """

    def __init__(self, ttl_seconds: int = settings.PERSISTENCE_TTL_SECONDS) -> None:
        self._ttl = int(ttl_seconds)

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    @staticmethod
    def _key(document_id: str) -> str:
        return f"{KEY_PREFIX}:{document_id}"

    async def put(self, index: DocumentIndex) -> None:
        r = await self._client()
        payload = index.model_dump_json().encode("utf-8")
        await r.set(self._key(index.documentId), payload, ex=self._ttl)

    async def get(self, document_id: str) -> Optional[DocumentIndex]:
        if not document_id:
            return None
        r = await self._client()
        raw = await r.get(self._key(document_id))
        if raw is None:
            return None
        try:
            index = DocumentIndex.model_validate_json(raw)
        except ValidationError:
            logger.error("index.decode.error doc=%s", document_id)
            return None
        await r.expire(self._key(document_id), self._ttl)
        return index
