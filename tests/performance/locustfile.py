"""
Load testing for the Geocoder Cache Layer using Locust.

Two user profiles:
- HotQueryUser repeats a small set of queries, so most requests are hits.
- ColdQueryUser sends unique queries, so every request is a miss and
  reaches the upstream geocoder (point it at mocks/nominatim).
"""

import random
import uuid

from locust import HttpUser, task, between


HOT_QUERIES = [
    "Boston",
    "Boston, Lincolnshire",
    "London",
    "Paris",
    "São Paulo",
]


def _check_envelope(response, expect_cache=None):
    if response.status_code != 200:
        response.failure(f"Unexpected status code: {response.status_code}")
        return

    data = response.json()
    if "cache" not in data or "data" not in data:
        response.failure("Missing envelope fields")
    elif expect_cache is not None and data["cache"] is not expect_cache:
        response.failure(f"Expected cache={expect_cache}")
    else:
        response.success()


class HotQueryUser(HttpUser):
    """Repeated queries served mostly from the cache."""

    wait_time = between(0.1, 0.5)
    weight = 3

    @task
    def lookup_hot(self):
        query = random.choice(HOT_QUERIES)
        with self.client.get("/api", params={"q": query}, name="/api [hot]", catch_response=True) as response:
            _check_envelope(response)


class ColdQueryUser(HttpUser):
    """Unique queries that always miss."""

    wait_time = between(0.5, 1.5)
    weight = 1

    @task
    def lookup_cold(self):
        query = f"Boston {uuid.uuid4().hex[:8]}"
        with self.client.get("/api", params={"q": query}, name="/api [cold]", catch_response=True) as response:
            _check_envelope(response, expect_cache=False)

    @task
    def health(self):
        self.client.get("/health")
