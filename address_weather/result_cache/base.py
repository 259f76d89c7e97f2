"""Shared protocol and entry type for forecast result caches."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class CacheEntry:
    """Stored forecast payload with the (clock) time it was written."""
    payload: str
    inserted_at: float


class ResultCache(Protocol):
    """Protocol for forecast result caches."""

    def get(self, key: str) -> Optional[str]:
        """Return the payload stored under key, or None if missing or expired."""

    def put(self, key: str, payload: str) -> None:
        """Store payload under key, replacing any existing entry."""

    def clear(self) -> None:
        """Drop every entry."""
