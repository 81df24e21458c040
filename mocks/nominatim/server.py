"""
Mock Nominatim server providing place search for local development.

Point ``GEOCACHE_UPSTREAM_BASE_URL`` at ``http://localhost:8088/search``.
"""

from typing import Any, Dict, List

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
import uvicorn

from shared.logging import get_logger


LICENCE = "Data © OpenStreetMap contributors, ODbL 1.0. http://osm.org/copyright"


class MockNominatimServer:
    """Mock Nominatim search implementation."""

    def __init__(self, port: int = 8088):
        self.port = port
        self.logger = get_logger("mock.nominatim")
        self.app = FastAPI(title="Mock Nominatim", version="1.0.0")
        self.places: List[Dict[str, Any]] = self._default_places()
        self.search_count = 0

        self._setup_routes()

    def _default_places(self) -> List[Dict[str, Any]]:
        """Sample places, in the order the real service ranks them."""
        return [
            {
                "place_id": 123,
                "licence": LICENCE,
                "osm_type": "relation",
                "osm_id": 2315704,
                "boundingbox": ["42.2279112", "42.3969775", "-71.1912442", "-70.8044881"],
                "lat": "42.3554334",
                "lon": "-71.060511",
                "display_name": "Boston, Suffolk County, Massachusetts, United States",
                "class": "boundary",
                "type": "administrative",
                "importance": 0.8175766114518,
                "icon": "https://nominatim.openstreetmap.org/ui/mapicons/poi_boundary_administrative.p.20.png",
                "addresstype": "city"
            },
            {
                "place_id": 124,
                "licence": LICENCE,
                "osm_type": "relation",
                "osm_id": 1656018,
                "boundingbox": ["52.9374034", "53.0121049", "-0.0859925", "0.0224637"],
                "lat": "52.9776939",
                "lon": "-0.0271722",
                "display_name": "Boston, Lincolnshire, England, United Kingdom",
                "class": "boundary",
                "type": "administrative",
                "importance": 0.5433155,
                "icon": "https://nominatim.openstreetmap.org/ui/mapicons/poi_boundary_administrative.p.20.png",
                "addresstype": "town"
            },
        ]

    def _setup_routes(self):
        """Set up mock search routes."""

        @self.app.get("/search")
        async def search(q: str = Query(""), format: str = Query("xml")):
            """Case-insensitive substring match on display_name."""
            self.search_count += 1
            if format not in ("json", "jsonv2"):
                return JSONResponse(status_code=400, content={"error": "Only JSON output is mocked"})

            needle = q.strip().lower()
            matches = [p for p in self.places if needle and needle in p["display_name"].lower()]
            self.logger.info("Mock search", q=q, matches=len(matches))
            return matches

    def run(self):
        """Run the mock server."""
        uvicorn.run(self.app, host="0.0.0.0", port=self.port)


if __name__ == "__main__":
    MockNominatimServer().run()
