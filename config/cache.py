# config/cache.py
import asyncio
from typing import Optional
from redis.asyncio import Redis
from config.settings import settings

_client: Optional[Redis] = None
_lock = asyncio.Lock()


async def get_redis() -> Redis:
    """Shared client; created on first use and pinged so startup fails fast."""
    global _client
    if _client is not None:
        return _client
    async with _lock:
        if _client is None:
            client = Redis.from_url(
                settings.REDIS_URL,
                decode_responses=False,  # index records are stored as raw JSON bytes
                socket_keepalive=True,
                health_check_interval=30,
            )
            await client.ping()
            _client = client
    return _client


async def close_redis() -> None:
    global _client
    async with _lock:
        if _client is not None:
            await _client.aclose()
            _client = None
