"""Forecast result caches and cache key strategies."""

from .base import CacheEntry, ResultCache
from .keys import KEY_STRATEGIES, full_address_key, key_strategy, zipcode_key
from .memory import InMemoryResultCache

__all__ = [
    "CacheEntry",
    "ResultCache",
    "InMemoryResultCache",
    "KEY_STRATEGIES",
    "full_address_key",
    "key_strategy",
    "zipcode_key",
]
