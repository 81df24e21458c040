"""
Lookup package for the Geocoder Service.

Holds the place result models, the lookup error taxonomy and the
cache-aside ``LookupService`` that ties the cache store and the upstream
client together.
"""

from .errors import (
    GeocodeLookupError,
    CacheReadError,
    CacheWriteError,
    UpstreamError,
    DecodeError,
)
from .models import PlaceResult, LookupResponse, dump_results, load_results
from .service import LookupService, LookupResult

__all__ = [
    "GeocodeLookupError",
    "CacheReadError",
    "CacheWriteError",
    "UpstreamError",
    "DecodeError",
    "PlaceResult",
    "LookupResponse",
    "dump_results",
    "load_results",
    "LookupService",
    "LookupResult",
]
