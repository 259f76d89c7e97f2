"""Exceptions raised while talking to the upstream geocoding and weather services."""

from typing import Optional


class WeatherServiceError(Exception):
    """Base class for failures that abort a forecast request."""


class UpstreamError(WeatherServiceError):
    """Network failure, timeout, or non-2xx response from an upstream service."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedResponseError(WeatherServiceError):
    """Upstream body was not JSON, or lacked fields we cannot do without."""

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source
