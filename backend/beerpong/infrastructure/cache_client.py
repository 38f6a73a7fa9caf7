"""Redis Throw Cache — async Redis wrapper with bounded commands and error mapping.

Invariants:
    - Every command is bounded by the client's socket timeout
    - All redis-py failures on write mapped to CacheWriteError (core/errors.py)
    - ping() never raises: False means unreachable
    - connect_cache() returns None when Redis is unreachable at startup;
      no reconnection is attempted afterwards

Design Decisions:
    - Wrapper over raw client: services see only the ThrowCache protocol
    - decode_responses=True: values round-trip as str
"""

import logging
from datetime import timedelta

from redis.asyncio import Redis
from redis.exceptions import RedisError

from beerpong.core.errors import CacheWriteError

logger = logging.getLogger(__name__)


class RedisThrowCache:
    """ThrowCache backed by Redis SET ... EX."""

    def __init__(self, client: Redis):
        self.client = client

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        connect_timeout: float = 20.0,
        socket_timeout: float = 10.0,
    ) -> "RedisThrowCache":
        client = Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=connect_timeout,
            socket_timeout=socket_timeout,
        )
        return cls(client)

    async def set(self, key: str, value: str, ttl: timedelta) -> None:
        """Write value under key with expiry. Last write wins."""
        try:
            await self.client.set(key, value, ex=ttl)
        except RedisError as e:
            logger.error(
                f"Redis SET failed: {e}",
                extra={"cache_key": key, "error_code": "CACHE_WRITE_FAILED"},
            )
            raise CacheWriteError(key, type(e).__name__)

    async def ping(self) -> bool:
        """Check Redis connectivity (startup probe and readiness)."""
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()


async def connect_cache(
    url: str, *, connect_timeout: float, socket_timeout: float,
) -> RedisThrowCache | None:
    """Build the cache and probe it once. Unreachable → None."""
    cache = RedisThrowCache.from_url(
        url, connect_timeout=connect_timeout, socket_timeout=socket_timeout,
    )
    if not await cache.ping():
        logger.error("Failed to connect to Redis; throws will be refused")
        await cache.close()
        return None
    logger.info("Redis connected")
    return cache
