"""
Cache package for Geocoder Service.

Defines the narrow ``CacheStore`` contract the lookup path depends on
(get with an explicit not-found signal, set with a TTL) and a Redis
implementation of it.
"""

from .store import CacheStore, CacheStoreError
from .redis_cache import RedisCacheStore

__all__ = ["CacheStore", "CacheStoreError", "RedisCacheStore"]
