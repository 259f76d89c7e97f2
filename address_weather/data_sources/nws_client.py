"""Fetch forecasts from the National Weather Service API."""
from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

import requests

from address_weather.data_sources.http import fetch_text, parse_json
from address_weather.domain import Coordinate
from address_weather.errors import MalformedResponseError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="nws_client")

SOURCE = "nws_points"
EMPTY_FORECAST = "{}"
_THREE_PLACES = Decimal("0.001")


def format_coordinate(value: float) -> str:
    """Render a coordinate with at most three decimals, half-even, no trailing zeros.

    Rounding applies to the exact binary value of the float, not its shortest
    repr, so 38.7725 (stored slightly above the tie) becomes 38.773.
    The NWS grid is far coarser than a thousandth of a degree, so extra
    precision only makes the points URL less stable.
    """
    rounded = Decimal(value).quantize(_THREE_PLACES, rounding=ROUND_HALF_EVEN)
    if rounded.is_zero():
        rounded = abs(rounded)
    return format(rounded.normalize(), "f")


class NwsForecastClient:
    """Two-step NWS lookup: points metadata, then the linked forecast document.

    ``url_template`` is the points endpoint with ``{latitude}`` and
    ``{longitude}`` placeholders.
    """

    def __init__(self, url_template: str, session: requests.Session, *, timeout: float = 10.0) -> None:
        self.url_template = url_template
        self.session = session
        self.timeout = timeout

    def build_points_url(self, coordinate: Coordinate) -> str:
        return self.url_template.format(
            latitude=format_coordinate(coordinate.latitude),
            longitude=format_coordinate(coordinate.longitude),
        )

    def get_forecast(self, coordinate: Coordinate) -> str:
        """Return the raw forecast JSON for a coordinate.

        Returns ``"{}"`` when the points response has no ``properties.forecast``
        link; the forecast body itself is passed through unparsed.
        """
        points = parse_json(
            fetch_text(self.session, self.build_points_url(coordinate), timeout=self.timeout),
            source=SOURCE,
        )
        if not isinstance(points, dict):
            raise MalformedResponseError("NWS points response root is not an object", source=SOURCE)

        properties = points.get("properties")
        if not isinstance(properties, dict) or "forecast" not in properties:
            logger.info("No forecast link for %s; returning empty forecast", coordinate)
            return EMPTY_FORECAST

        forecast_url = properties["forecast"]
        if not isinstance(forecast_url, str) or not forecast_url:
            raise MalformedResponseError(
                f"NWS properties.forecast is not a URL: {forecast_url!r}", source=SOURCE
            )
        logger.debug("Fetching forecast from %s", forecast_url)
        return fetch_text(self.session, forecast_url, timeout=self.timeout)
