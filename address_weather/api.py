"""HTTP API for address forecasts."""

from functools import lru_cache

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from .config import get_settings
from .domain import Address
from .forecast_pipeline import ForecastPipeline, build_pipeline
from .formatter import NOT_FOUND_RESPONSE, format_result
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="address_weather/api")

JSON_MEDIA_TYPE = "application/json"

router = APIRouter()


@lru_cache(maxsize=1)
def get_pipeline() -> ForecastPipeline:
    """Build the process-wide pipeline (and its cache) on first use."""
    return build_pipeline(get_settings())


@router.get("/forecast")
def forecast(
    street: str = Query(..., min_length=1, description="First line of the street address"),
    city: str = Query(..., min_length=1),
    state: str = Query(..., min_length=2, max_length=2, description="Two letter state abbreviation"),
    zipcode: str = Query(..., min_length=1),
    pipeline: ForecastPipeline = Depends(get_pipeline),
):
    """Return the forecast for an address, flagging whether it came from the cache."""
    logger.info("Forecast requested for zipcode %s", zipcode)
    result = pipeline.resolve(Address(street=street, city=city, state=state, zipcode=zipcode))
    if not result.found:
        return Response(content=NOT_FOUND_RESPONSE, media_type=JSON_MEDIA_TYPE)
    return Response(content=format_result(result), media_type=JSON_MEDIA_TYPE)
