"""
Cache-aside lookup for Geocoder Service.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional, Protocol, TYPE_CHECKING
from urllib.parse import quote

from pydantic import ValidationError

from shared.logging import get_logger
from shared.tracing import trace_operation
from ..cache.store import CacheStore
from .errors import CacheReadError, CacheWriteError, DecodeError, GeocodeLookupError, UpstreamError
from .models import PlaceResult, dump_results, load_results

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_CACHE_TTL = timedelta(seconds=15)


class UpstreamClient(Protocol):
    """Anything that can search the upstream geocoder."""

    async def fetch(self, escaped_query: str) -> List[PlaceResult]:
        ...


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a resolve call."""
    results: List[PlaceResult]
    from_cache: bool


class LookupService:
    """Resolve queries through the cache, falling back to the upstream geocoder.

    The query string is the cache key verbatim. Concurrent misses for the
    same key each fetch and write independently; the last write wins.
    """

    def __init__(
        self,
        cache: CacheStore,
        upstream: UpstreamClient,
        *,
        ttl: timedelta = DEFAULT_CACHE_TTL,
        fail_on_cache_read_error: bool = True,
        fail_on_cache_write_error: bool = True,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.cache = cache
        self.upstream = upstream
        self.ttl = ttl
        self.fail_on_cache_read_error = fail_on_cache_read_error
        self.fail_on_cache_write_error = fail_on_cache_write_error
        self.metrics = metrics
        self.logger = get_logger("geocoder.lookup")

    async def resolve(self, query: str) -> LookupResult:
        """Return the places for ``query`` and whether they came from the cache.

        Raises a ``GeocodeLookupError`` subclass on any downstream failure.
        """
        with trace_operation("geocoder.resolve") as span:
            try:
                result = await self._resolve(query)
            except GeocodeLookupError as exc:
                self._count("geocoder_lookup_failures_total", kind=exc.code)
                raise

            span.set_attribute("geocoder.cache_hit", result.from_cache)
            span.set_attribute("geocoder.result_count", len(result.results))
            return result

    async def _resolve(self, query: str) -> LookupResult:
        cached = await self._read(query)

        if cached is None:
            return await self._resolve_miss(query)

        try:
            results = load_results(cached)
        except ValidationError as exc:
            self.logger.error("Cached value is malformed", query=query, error=str(exc))
            raise DecodeError(details={"query": query}) from exc

        self._count("geocoder_cache_hits_total")
        self.logger.debug("Cache hit", query=query, results=len(results))
        return LookupResult(results=results, from_cache=True)

    async def _read(self, query: str) -> Optional[bytes]:
        try:
            return await self.cache.get(query)
        except Exception as exc:
            if self.fail_on_cache_read_error:
                self.logger.error("Cache read failed", query=query, error=str(exc))
                raise CacheReadError(str(exc) or "Cache read failed", details={"query": query}) from exc

            self.logger.warning("Cache read failed, fetching upstream", query=query, error=str(exc))
            return None

    async def _resolve_miss(self, query: str) -> LookupResult:
        self._count("geocoder_cache_misses_total")
        self.logger.debug("Cache miss", query=query)

        escaped = quote(query, safe="")
        results = await self._fetch(escaped)
        await self._write(query, dump_results(results))

        return LookupResult(results=results, from_cache=False)

    async def _fetch(self, escaped: str) -> List[PlaceResult]:
        if self.metrics is not None:
            with self.metrics.time_operation("geocoder_upstream_duration_seconds"):
                return await self._call_upstream(escaped)
        return await self._call_upstream(escaped)

    async def _call_upstream(self, escaped: str) -> List[PlaceResult]:
        try:
            return await self.upstream.fetch(escaped)
        except UpstreamError:
            raise
        except Exception as exc:
            self.logger.error("Upstream fetch failed", query=escaped, error=str(exc))
            raise UpstreamError(str(exc) or "Upstream geocoder failed", details={"query": escaped}) from exc

    async def _write(self, query: str, payload: bytes) -> None:
        try:
            await self.cache.set(query, payload, self.ttl)
        except Exception as exc:
            if self.fail_on_cache_write_error:
                self.logger.error("Cache write failed", query=query, error=str(exc))
                raise CacheWriteError(str(exc) or "Cache write failed", details={"query": query}) from exc

            self.logger.warning("Cache write failed, returning fresh data", query=query, error=str(exc))
            return

        self.logger.debug("Cached lookup result", query=query, ttl=self.ttl.total_seconds())

    def _count(self, metric_name: str, **labels):
        if self.metrics is not None:
            self.metrics.increment_counter(metric_name, **labels)
