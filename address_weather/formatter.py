"""Render pipeline results as the JSON documents returned to callers."""

from address_weather.domain import ForecastResult

# Returned as-is when geocoding finds no match; not produced by format_result.
NOT_FOUND_RESPONSE = '{ "success": false, "message": "Forecast not found for the provided address." }'


def format_result(result: ForecastResult) -> str:
    """Embed the forecast payload verbatim alongside the cache-hit flag.

    The payload is never re-parsed or validated.
    """
    if not result.found:
        raise ValueError("format_result needs a found forecast; use NOT_FOUND_RESPONSE instead")
    cached = "true" if result.cached else "false"
    return f'{{ "forecast": {result.payload}, "cached": {cached} }}'
