"""
Redis cache store for Geocoder Service.
"""

from datetime import timedelta
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from shared.logging import get_logger
from .store import CacheStoreError


class RedisCacheStore:
    """Redis-backed ``CacheStore``.

    One connection pool is created per process and shared by all
    concurrent lookups; ``start`` verifies connectivity and ``stop``
    releases the pool.
    """

    def __init__(self, redis_url: str, socket_timeout: float = 5.0):
        self.redis_url = redis_url
        self.logger = get_logger("geocoder.cache.redis")
        try:
            self.redis: redis.Redis = redis.from_url(
                redis_url,
                decode_responses=False,
                socket_connect_timeout=socket_timeout,
                socket_timeout=socket_timeout,
                health_check_interval=30
            )
        except ValueError as e:
            raise CacheStoreError("connect", f"invalid Redis URL: {e}") from e

    async def start(self):
        """Start the Redis cache store."""
        try:
            await self.redis.ping()
        except RedisError as e:
            self.logger.error("Failed to start Redis cache", error=str(e))
            raise CacheStoreError("ping", str(e)) from e

        self.logger.info("Redis cache started")

    async def stop(self):
        """Stop the Redis cache store."""
        await self.redis.aclose()
        self.logger.info("Redis cache stopped")

    async def get(self, key: str) -> Optional[bytes]:
        """Return the stored bytes for ``key`` or ``None`` when absent."""
        try:
            return await self.redis.get(key)
        except RedisError as e:
            raise CacheStoreError("get", str(e)) from e

    async def set(self, key: str, value: bytes, ttl: timedelta) -> None:
        """Store ``value`` under ``key`` expiring after ``ttl``."""
        try:
            ok = await self.redis.set(key, value, px=int(ttl.total_seconds() * 1000))
        except RedisError as e:
            raise CacheStoreError("set", str(e)) from e

        if not ok:
            raise CacheStoreError("set", "write was not acknowledged")

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            await self.redis.ping()
            return True
        except RedisError:
            return False
