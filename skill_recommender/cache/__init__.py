"""
Caching module for recommendation responses.

Provides the TTL response cache and the in-flight request map used to
collapse concurrent duplicate requests.
"""

from skill_recommender.cache.inflight import InFlightRequests
from skill_recommender.cache.response_cache import (
    DEFAULT_TTL_SECONDS,
    CacheEntry,
    ResponseCache,
)

__all__ = [
    "ResponseCache",
    "CacheEntry",
    "InFlightRequests",
    "DEFAULT_TTL_SECONDS",
]
