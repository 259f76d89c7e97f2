"""Upstream clients for geocoding and forecast lookups."""

from .base import ForecastAdapter, GeocodeAdapter
from .census_geocoder import CensusGeocodeClient, coordinates_from_census_json
from .factory import build_forecaster, build_geocoder, build_upstream_session
from .nws_client import EMPTY_FORECAST, NwsForecastClient, format_coordinate

__all__ = [
    "ForecastAdapter",
    "GeocodeAdapter",
    "CensusGeocodeClient",
    "coordinates_from_census_json",
    "NwsForecastClient",
    "EMPTY_FORECAST",
    "format_coordinate",
    "build_forecaster",
    "build_geocoder",
    "build_upstream_session",
]
