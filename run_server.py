import os
import sys

import uvicorn
from pydantic import ValidationError

from address_weather.config import get_settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


def load_settings_or_exit():
    """
    Load configuration before the server starts so a missing upstream URL or
    cache limit stops the process instead of failing the first request.
    """
    try:
        return get_settings()
    except ValidationError as exc:
        logger.error("Invalid configuration; set the WEATHERSERVICE_* environment variables:\n%s", exc)
        sys.exit(1)


def configure_logging(settings) -> None:
    """Apply the configured log level; runs once settings have loaded."""
    setup_logging(level=settings.log_level.upper(), force=True)


if __name__ == "__main__":
    settings = load_settings_or_exit()
    configure_logging(settings)
    logger.info(
        "Starting address weather service (cache_expires_minutes=%s, cache_max_number_entries=%s)",
        settings.cache_expires_minutes,
        settings.cache_max_number_entries,
    )

    uvicorn.run(
        "address_weather.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8080)),
        reload=False,
    )
