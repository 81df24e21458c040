"""
Geocoder Service package for the Geocoder Cache Layer.

This package answers place search queries through a cache-aside lookup:
Redis is consulted first and the upstream geocoder (Nominatim) is only
called on a miss, with the result stored under a short TTL. It provides:

- app.main: API surface for lookups and health.
- app.lookup: Place models, the error taxonomy and the lookup service.
- app.cache: Cache store contract and its Redis implementation.
- app.adapters: HTTP client for the upstream geocoder.

Guidelines:
- The service is stateless; the cache lives in Redis.
- Query strings are cache keys verbatim; never normalize them.
- Every failure in the lookup path fails the request; nothing is retried.
"""
