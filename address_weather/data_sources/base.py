"""Interfaces for the upstream lookups the forecast pipeline depends on."""

from __future__ import annotations

from typing import Optional, Protocol

from address_weather.domain import Address, Coordinate


class GeocodeAdapter(Protocol):
    """Anything that can turn a postal address into a single coordinate."""

    def geocode(self, address: Address) -> Optional[Coordinate]:
        """Return the best matching coordinate, or None when nothing matches."""
        ...


class ForecastAdapter(Protocol):
    """Anything that can produce a raw forecast document for a coordinate."""

    def get_forecast(self, coordinate: Coordinate) -> str:
        """Return the forecast document as JSON text."""
        ...
