"""
Unit tests for the lookup error taxonomy.
"""

import pytest

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.errors import GeoCacheException
from service_geocoder.app.cache.store import CacheStoreError
from service_geocoder.app.lookup.errors import (
    GeocodeLookupError, CacheReadError, CacheWriteError, DecodeError, UpstreamError
)


class TestLookupErrors:
    """Test cases for lookup errors."""

    @pytest.mark.parametrize("error_cls, code", [
        (CacheReadError, "CACHE_READ_ERROR"),
        (UpstreamError, "UPSTREAM_ERROR"),
        (CacheWriteError, "CACHE_WRITE_ERROR"),
        (DecodeError, "DECODE_ERROR"),
    ])
    def test_codes_and_hierarchy(self, error_cls, code):
        error = error_cls(details={"query": "Boston"})

        assert isinstance(error, GeocodeLookupError)
        assert isinstance(error, GeoCacheException)
        assert error.code == code
        assert error.details == {"query": "Boston"}

    def test_lookup_error_does_not_shadow_builtin(self):
        assert not issubclass(GeocodeLookupError, LookupError)

    def test_to_response(self):
        response = UpstreamError("Unexpected status 502", details={"status_code": 502}).to_response()

        assert response.code == "UPSTREAM_ERROR"
        assert response.message == "Unexpected status 502"
        assert response.details == {"status_code": 502}
        assert response.trace_id is None

    def test_cache_store_error_names_operation(self):
        error = CacheStoreError("get", "Connection refused")

        assert error.operation == "get"
        assert error.message == "get: Connection refused"
        assert not isinstance(error, GeocodeLookupError)
