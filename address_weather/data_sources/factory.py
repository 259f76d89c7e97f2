"""Build the upstream clients from settings at startup."""

from __future__ import annotations

import requests

from address_weather import config
from address_weather.data_sources.census_geocoder import CensusGeocodeClient
from address_weather.data_sources.http import build_session
from address_weather.data_sources.nws_client import NwsForecastClient
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


def build_upstream_session(settings: config.Settings) -> requests.Session:
    """Create the HTTP session shared by both upstream clients."""
    return build_session(
        user_agent=settings.user_agent,
        retries=settings.http_retries,
        backoff_factor=settings.http_backoff_factor,
    )


def build_geocoder(settings: config.Settings, session: requests.Session | None = None) -> CensusGeocodeClient:
    """Instantiate the Census geocoder for the configured URL template."""
    logger.info("Using Census geocoder (url_template=%s)", settings.geocode_url)
    return CensusGeocodeClient(
        settings.geocode_url,
        session or build_upstream_session(settings),
        timeout=settings.http_timeout_seconds,
    )


def build_forecaster(settings: config.Settings, session: requests.Session | None = None) -> NwsForecastClient:
    """Instantiate the NWS forecast client for the configured points URL template."""
    logger.info("Using NWS forecast client (url_template=%s)", settings.nws_url)
    return NwsForecastClient(
        settings.nws_url,
        session or build_upstream_session(settings),
        timeout=settings.http_timeout_seconds,
    )
