"""
Cache store contract for Geocoder Service.
"""

from datetime import timedelta
from typing import Dict, Any, Optional, Protocol, runtime_checkable

from shared.errors import GeoCacheException


class CacheStoreError(GeoCacheException):
    """A cache store operation failed (connection, timeout, rejection)."""

    def __init__(self, operation: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.operation = operation
        super().__init__("CACHE_STORE_ERROR", f"{operation}: {message}", details)


@runtime_checkable
class CacheStore(Protocol):
    """Key-value store with expiring entries.

    ``get`` returns ``None`` for a missing key and raises for anything else;
    it must not touch the entry's expiry. ``set`` overwrites any existing
    entry and resets its expiry.
    """

    async def get(self, key: str) -> Optional[bytes]:
        ...

    async def set(self, key: str, value: bytes, ttl: timedelta) -> None:
        ...
