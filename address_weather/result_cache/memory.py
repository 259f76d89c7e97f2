"""Bounded, TTL-aware in-memory forecast cache."""

import threading
import time
from collections import OrderedDict
from typing import Callable, Optional

from address_weather.result_cache.base import CacheEntry, ResultCache
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="result_cache/in_memory")


class InMemoryResultCache(ResultCache):
    """Thread-safe LRU cache whose entries expire a fixed time after being written.

    Expired entries are dropped lazily on access and purged before any live
    entry is evicted for capacity.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be greater than zero, got {ttl_seconds}")
        if max_entries <= 0:
            raise ValueError(f"max_entries must be greater than zero, got {max_entries}")
        logger.info("Initializing the cache. (ttl_seconds=%s max_entries=%s)", ttl_seconds, max_entries)
        self.ttl = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        # oldest-used first
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.inserted_at >= self.ttl

    def _purge_expired(self, now: float) -> None:
        stale = [key for key, entry in self._entries.items() if self._expired(entry, now)]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug("Purged %d expired cache entries", len(stale))

    def get(self, key: str) -> Optional[str]:
        """Return the live payload for key and mark it most recently used."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry, self._clock()):
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return entry.payload

    def put(self, key: str, payload: str) -> None:
        """Insert or replace the entry for key, evicting if the cache is full."""
        with self._lock:
            now = self._clock()
            self._entries.pop(key, None)
            if len(self._entries) >= self.max_entries:
                self._purge_expired(now)
            while len(self._entries) >= self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted least recently used cache entry '%s'", evicted)
            self._entries[key] = CacheEntry(payload=payload, inserted_at=now)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        """Number of live (unexpired) entries."""
        with self._lock:
            self._purge_expired(self._clock())
            return len(self._entries)
