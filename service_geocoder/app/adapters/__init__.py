"""
Adapters package for the Geocoder Service.

Contains HTTP client wrappers for external dependencies. Adapters own
base URLs, request shapes, timeouts and the mapping of transport
failures to the lookup error taxonomy. They never retry.
"""

from .nominatim_client import NominatimClient

__all__ = ["NominatimClient"]
