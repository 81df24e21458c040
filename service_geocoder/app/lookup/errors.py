"""
Lookup error taxonomy for Geocoder Service.

Every failure in the cache-aside path surfaces as a ``GeocodeLookupError``
subclass; the HTTP layer maps all of them to the same 500 response.
"""

from typing import Dict, Any, Optional

from shared.errors import GeoCacheException


class GeocodeLookupError(GeoCacheException):
    """Base class for failures while resolving a query."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code, message, details)


class CacheReadError(GeocodeLookupError):
    """The cache store failed for a reason other than a missing key."""

    def __init__(self, message: str = "Cache read failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_READ_ERROR", message, details)


class UpstreamError(GeocodeLookupError):
    """The upstream call failed or returned an unexpected body."""

    def __init__(self, message: str = "Upstream geocoder failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("UPSTREAM_ERROR", message, details)


class CacheWriteError(GeocodeLookupError):
    """The cache store rejected a write."""

    def __init__(self, message: str = "Cache write failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_WRITE_ERROR", message, details)


class DecodeError(GeocodeLookupError):
    """A cached value could not be parsed back into places."""

    def __init__(self, message: str = "Cached value is malformed", details: Optional[Dict[str, Any]] = None):
        super().__init__("DECODE_ERROR", message, details)
