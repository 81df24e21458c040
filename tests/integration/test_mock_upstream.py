"""
Lookup flow against the mock Nominatim server.
"""

import httpx
import pytest
import pytest_asyncio

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from mocks.nominatim.server import MockNominatimServer
from shared.test_helpers import InMemoryCacheStore
from service_geocoder.app.adapters.nominatim_client import NominatimClient
from service_geocoder.app.lookup.service import LookupService


class TestMockUpstream:
    """LookupService wired to the mock search API over ASGI."""

    @pytest.fixture
    def mock_server(self):
        return MockNominatimServer()

    @pytest_asyncio.fixture
    async def lookup(self, mock_server):
        client = NominatimClient(
            "http://nominatim.mock/search",
            transport=httpx.ASGITransport(app=mock_server.app),
        )
        await client.start()
        yield LookupService(InMemoryCacheStore(), client)
        await client.stop()

    @pytest.mark.asyncio
    async def test_results_follow_upstream_ranking(self, lookup, mock_server):
        result = await lookup.resolve("Boston")

        assert result.from_cache is False
        assert [p.place_id for p in result.results] == [123, 124]
        assert result.results[0].place_class == "boundary"

    @pytest.mark.asyncio
    async def test_second_lookup_does_not_reach_upstream(self, lookup, mock_server):
        await lookup.resolve("Boston, Lincolnshire")
        result = await lookup.resolve("Boston, Lincolnshire")

        assert result.from_cache is True
        assert [p.place_id for p in result.results] == [124]
        assert mock_server.search_count == 1

    @pytest.mark.asyncio
    async def test_no_match_caches_empty_list(self, lookup, mock_server):
        first = await lookup.resolve("Atlantis")
        second = await lookup.resolve("Atlantis")

        assert first.results == second.results == []
        assert second.from_cache is True
        assert mock_server.search_count == 1
