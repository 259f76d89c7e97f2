"""Value types passed between the cache, the upstream clients, and the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    """Decimal latitude/longitude pair."""
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


@dataclass(frozen=True)
class Address:
    """Postal address as submitted by the caller."""
    street: str
    city: str
    state: str  # two letter abbreviation
    zipcode: str

    def one_line(self) -> str:
        """Render as ``street, city, state zipcode`` for log messages."""
        return f"{self.street}, {self.city}, {self.state} {self.zipcode}"


@dataclass(frozen=True)
class ForecastResult:
    """Outcome of one pipeline run.

    ``payload`` is the opaque forecast document; it is ``None`` only for the
    not-found outcome, where geocoding produced no match.
    """
    payload: Optional[str]
    cached: bool = False

    @property
    def found(self) -> bool:
        return self.payload is not None

    @classmethod
    def not_found(cls) -> "ForecastResult":
        return cls(payload=None, cached=False)
