"""Resolve an address to a forecast: cache first, then geocode and fetch."""
from __future__ import annotations

from typing import Optional

from address_weather import config
from address_weather.data_sources import (
    ForecastAdapter,
    GeocodeAdapter,
    build_forecaster,
    build_geocoder,
    build_upstream_session,
)
from address_weather.domain import Address, ForecastResult
from address_weather.result_cache import InMemoryResultCache, ResultCache, key_strategy, zipcode_key
from address_weather.result_cache.keys import KeyFunc
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="forecast_pipeline")


class ForecastPipeline:
    """Orchestrates one forecast lookup.

    A cache hit skips both upstream services. On a miss the address is
    geocoded, then the forecast is fetched and cached under the address's key.
    An address with no geocoder match yields ``ForecastResult.not_found()``
    and is never cached. Upstream errors propagate to the caller.
    """

    def __init__(
        self,
        geocoder: GeocodeAdapter,
        forecaster: ForecastAdapter,
        cache: ResultCache,
        key_func: KeyFunc = zipcode_key,
    ) -> None:
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.cache = cache
        self.key_func = key_func

    def resolve(self, address: Address) -> ForecastResult:
        key = self.key_func(address)

        logger.debug("Attempting to get '%s' from the cache.", key)
        payload: Optional[str] = self.cache.get(key)
        if payload is not None:
            logger.debug("Cache hit for '%s'.", key)
            return ForecastResult(payload=payload, cached=True)

        logger.debug("Cache miss for '%s'.", key)
        coordinate = self.geocoder.geocode(address)
        if coordinate is None:
            logger.warning("No coordinates found for address: '%s'", address.one_line())
            return ForecastResult.not_found()
        logger.debug("Found coordinates %s for address: '%s'", coordinate, address.one_line())

        payload = self.forecaster.get_forecast(coordinate)

        logger.debug("Adding '%s' to the cache.", key)
        self.cache.put(key, payload)
        return ForecastResult(payload=payload, cached=False)


def build_pipeline(settings: config.Settings) -> ForecastPipeline:
    """Wire the Census geocoder, NWS client, and in-memory cache from settings."""
    session = build_upstream_session(settings)
    return ForecastPipeline(
        geocoder=build_geocoder(settings, session),
        forecaster=build_forecaster(settings, session),
        cache=InMemoryResultCache(
            ttl_seconds=settings.cache_ttl_seconds,
            max_entries=settings.cache_max_number_entries,
        ),
        key_func=key_strategy(settings.cache_key_strategy),
    )
