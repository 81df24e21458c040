"""
Geocoder service for the Geocoder Cache Layer.
"""

from datetime import timedelta
from typing import Dict, Optional

from fastapi import Query, Request, Response

from shared.base_service import BaseService
from shared.config import ServiceConfig
from .adapters.nominatim_client import NominatimClient
from .cache.redis_cache import RedisCacheStore
from .cache.store import CacheStore
from .lookup.errors import GeocodeLookupError
from .lookup.models import LookupResponse
from .lookup.service import LookupService, UpstreamClient


class GeocoderService(BaseService):
    """Geocoder service implementation.

    The cache store and upstream client are created here (or injected),
    opened on application startup and closed on shutdown.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        cache_store: Optional[CacheStore] = None,
        upstream_client: Optional[UpstreamClient] = None,
    ):
        super().__init__("geocoder", config)

        self.cache_store = cache_store or RedisCacheStore(self.config.cache_connection_url())
        self.upstream_client = upstream_client or NominatimClient(
            self.config.upstream_base_url,
            timeout=self.config.upstream_timeout_seconds,
            user_agent=self.config.upstream_user_agent,
        )
        self.lookup_service = LookupService(
            self.cache_store,
            self.upstream_client,
            ttl=timedelta(seconds=self.config.cache_ttl_seconds),
            fail_on_cache_read_error=self.config.fail_on_cache_read_error,
            fail_on_cache_write_error=self.config.fail_on_cache_write_error,
            metrics=self.metrics,
        )

        self._setup_geocoder_routes()

    def _setup_geocoder_routes(self):
        """Set up geocoder-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "geocoder",
                "message": "Geocoder Cache Layer - Geocoder Service",
                "version": "1.0.0",
                "capabilities": ["geocoding", "caching"]
            }

        @self.app.get("/api", response_model=LookupResponse)
        async def lookup(q: str = Query("", description="Free-form place query")):
            """Resolve a place query through the cache."""
            result = await self.lookup_service.resolve(q)
            return LookupResponse(cache=result.from_cache, data=result.results)

        @self.app.exception_handler(GeocodeLookupError)
        async def lookup_error_handler(request: Request, exc: GeocodeLookupError):
            """All lookup failures collapse to an empty 500."""
            self.logger.error(
                "Lookup failed",
                code=exc.code,
                message=exc.message,
                details=exc.details
            )
            self.metrics.record_error(exc.code)
            return Response(status_code=500)

    async def _check_dependencies(self) -> Dict[str, str]:
        """Check geocoder service dependencies."""
        dependencies = {}

        health_check = getattr(self.cache_store, "health_check", None)
        if health_check is not None:
            try:
                dependencies["redis"] = "ok" if await health_check() else "error"
            except Exception:
                dependencies["redis"] = "error"

        return dependencies

    async def start(self):
        """Start geocoder service components."""
        for component in (self.cache_store, self.upstream_client):
            start = getattr(component, "start", None)
            if start is not None:
                await start()

        self.logger.info(
            "Geocoder service started",
            upstream=self.config.upstream_base_url,
            ttl_seconds=self.config.cache_ttl_seconds
        )

    async def stop(self):
        """Stop geocoder service components."""
        for component in (self.upstream_client, self.cache_store):
            stop = getattr(component, "stop", None)
            if stop is not None:
                await stop()

        self.logger.info("Geocoder service stopped")


def create_app():
    """Create geocoder service application."""
    service = GeocoderService()
    return service.app


def main():
    """Run the geocoder service with uvicorn."""
    GeocoderService().run()


if __name__ == "__main__":
    main()
