"""
Time-to-live cache for computed recommendation sets.

Entries expire lazily: an expired entry is dropped the first time it is
read after its lifetime, there is no background sweep.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 30 * 60


@dataclass
class CacheEntry(Generic[T]):
    """
    A cached payload.

    Attributes:
        key: Cache key the entry is stored under.
        payload: Cached value.
        created_at: Clock reading when the entry was stored.
    """

    key: str
    payload: T
    created_at: float


class ResponseCache(Generic[T]):
    """
    In-process TTL cache.

    Typical usage:
        >>> cache = ResponseCache(ttl_seconds=1800)
        >>> cache.set("YouTube-watch-python", result)
        >>> cache.get("YouTube-watch-python") is result
        True

    Attributes:
        ttl_seconds: Entry lifetime; an entry older than this is absent.
        clock: Callable returning the current time in seconds.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: Dict[str, CacheEntry[T]] = {}

    def get(self, key: str) -> Optional[T]:
        """
        Return the cached payload, or None when absent or expired.

        Expired entries are removed.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self.clock() - entry.created_at > self.ttl_seconds:
            del self._entries[key]
            logger.debug(f"Cache entry expired: {key}")
            return None

        return entry.payload

    def set(self, key: str, payload: T) -> None:
        """Store a payload, replacing any existing entry."""
        self._entries[key] = CacheEntry(key=key, payload=payload, created_at=self.clock())

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
