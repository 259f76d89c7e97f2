"""Geocode postal addresses with the US Census Bureau geocoder."""
from __future__ import annotations

import math
from typing import Any, Optional
from urllib.parse import quote

import requests

from address_weather.data_sources.http import fetch_text, parse_json
from address_weather.domain import Address, Coordinate
from address_weather.errors import MalformedResponseError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="census_geocoder")

SOURCE = "census_geocoder"


def _malformed(message: str) -> MalformedResponseError:
    return MalformedResponseError(message, source=SOURCE)


def _as_number(value: Any, field: str, limit: float) -> float:
    """Return a finite coordinate within +/-limit degrees."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _malformed(f"Census match has non-numeric coordinates.{field}: {value!r}")
    if (isinstance(value, float) and not math.isfinite(value)) or abs(value) > limit:
        raise _malformed(f"Census match has out-of-range coordinates.{field}: {value!r}")
    return float(value)


def coordinates_from_census_json(text: str) -> Optional[Coordinate]:
    """Extract the first match's coordinates from a Census geocoder response.

    Returns None when the response carries no ``result.addressMatches`` or the
    list is empty. Census reports ``x`` as longitude and ``y`` as latitude.
    Later matches are ignored.
    """
    root = parse_json(text, source=SOURCE)
    if not isinstance(root, dict):
        raise _malformed("Census response root is not an object")

    result = root.get("result")
    if not isinstance(result, dict) or "addressMatches" not in result:
        return None

    matches = result["addressMatches"]
    if not isinstance(matches, list):
        raise _malformed("Census result.addressMatches is not a list")
    if not matches:
        return None

    first = matches[0]
    coordinates = first.get("coordinates") if isinstance(first, dict) else None
    if not isinstance(coordinates, dict):
        raise _malformed("Census match has no coordinates object")

    return Coordinate(
        latitude=_as_number(coordinates.get("y"), "y", 90.0),
        longitude=_as_number(coordinates.get("x"), "x", 180.0),
    )


class CensusGeocodeClient:
    """Census Bureau geocoding client.

    ``url_template`` holds ``{street}``, ``{city}``, ``{state}`` and
    ``{zipcode}`` placeholders; each is filled with the URL-encoded field.
    """

    def __init__(self, url_template: str, session: requests.Session, *, timeout: float = 10.0) -> None:
        self.url_template = url_template
        self.session = session
        self.timeout = timeout

    def build_url(self, address: Address) -> str:
        return self.url_template.format(
            street=quote(address.street, safe=""),
            city=quote(address.city, safe=""),
            state=quote(address.state, safe=""),
            zipcode=quote(address.zipcode, safe=""),
        )

    def geocode(self, address: Address) -> Optional[Coordinate]:
        """Resolve an address to its best (first) matching coordinate, or None."""
        text = fetch_text(self.session, self.build_url(address), timeout=self.timeout)
        return coordinates_from_census_json(text)
