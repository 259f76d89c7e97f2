"""Service configuration pulled from environment variables via pydantic."""
from functools import lru_cache
from string import Formatter
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")

GEOCODE_PLACEHOLDERS = frozenset({"street", "city", "state", "zipcode"})
NWS_PLACEHOLDERS = frozenset({"latitude", "longitude"})


def _placeholders(template: str) -> set[str]:
    """Return the named ``{field}`` placeholders used in a URL template."""
    return {field for _, field, _, _ in Formatter().parse(template) if field}


class Settings(BaseSettings):
    """Environment-driven configuration for the address weather service.

    The upstream URLs and cache limits have no defaults; a missing value fails
    startup with a ``pydantic.ValidationError``.
    """
    model_config = SettingsConfigDict(env_prefix="WEATHERSERVICE_", extra="ignore")

    # e.g. https://geocoding.geo.census.gov/geocoder/locations/address?street={street}&city={city}
    #      &state={state}&zip={zipcode}&benchmark=Public_AR_Current&format=json
    geocode_url: str
    # e.g. https://api.weather.gov/points/{latitude},{longitude}
    nws_url: str
    cache_expires_minutes: int = Field(gt=0)
    cache_max_number_entries: int = Field(gt=0)
    cache_key_strategy: Literal["zipcode", "address"] = "zipcode"

    http_timeout_seconds: float = Field(default=10.0, gt=0)
    http_retries: int = Field(default=0, ge=0)
    http_backoff_factor: float = Field(default=0.2, ge=0)
    user_agent: str = "address-weather-service"
    log_level: str = "INFO"

    @field_validator("geocode_url", mode="after")
    @classmethod
    def geocode_url_has_address_fields(cls, v: str) -> str:
        missing = GEOCODE_PLACEHOLDERS - _placeholders(v)
        if missing:
            raise ValueError(f"geocode_url is missing placeholders: {sorted(missing)}")
        return v

    @field_validator("nws_url", mode="after")
    @classmethod
    def nws_url_has_coordinate_fields(cls, v: str) -> str:
        missing = NWS_PLACEHOLDERS - _placeholders(v)
        if missing:
            raise ValueError(f"nws_url is missing placeholders: {sorted(missing)}")
        return v

    @property
    def cache_ttl_seconds(self) -> int:
        return self.cache_expires_minutes * 60


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    loaded = Settings()
    logger.debug("Loaded settings: %s", loaded.model_dump_json())
    return loaded


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.info(get_settings().model_dump_json(indent=4))
