"""
Logging setup shared by the address weather service.

The entrypoint calls ``setup_logging`` once; modules grab a tagged logger:

    from utils.logging_utils import get_tagged_logger

    logger = get_tagged_logger(__name__, tag="nws_client")
    logger.info("Requesting forecast grid")

Every record carries ``job_name`` and ``tag`` fields so the formatter can show
which process and which component emitted it.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Mapping, Optional


# Give early log lines (before setup_logging) timestamps and levels.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

DEFAULT_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(job_name)s | %(tag)s | %(name)s | %(message)s"
)
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_JOB_NAME = "address_weather_service"

_CONFIGURED: bool = False


class InfoAndBelowFilter(logging.Filter):
    """Pass DEBUG and INFO records only; WARNING+ is routed to stderr."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno <= logging.INFO


class ComponentTagFilter(logging.Filter):
    """Fill in ``record.tag`` from the logger name when no adapter set one."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "tag"):
            record.tag = record.name.rsplit(".", 1)[-1] if record.name else "-"
        return True


class JobNameFilter(logging.Filter):
    """Stamp the process-wide job name onto every record."""

    def __init__(self, job_name: Optional[str] = None) -> None:
        super().__init__()
        self.job_name = job_name or "-"

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "job_name"):
            record.job_name = self.job_name
        return True


def build_logging_config(
    *,
    level: str | int = "INFO",
    job_name: Optional[str] = DEFAULT_JOB_NAME,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> Mapping[str, Any]:
    """
    Return a ``dictConfig`` mapping with a stdout and a stderr handler.

    DEBUG/INFO go to stdout, WARNING and above go to stderr. Both handlers
    share one formatter and the tag/job-name filters.
    """
    shared_filters = ["component_tag", "job_name"]
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "component_tag": {"()": ComponentTagFilter},
            "job_name": {"()": JobNameFilter, "job_name": job_name},
            "info_and_below": {"()": InfoAndBelowFilter},
        },
        "formatters": {
            "standard": {"format": log_format, "datefmt": DEFAULT_DATE_FORMAT},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "filters": [*shared_filters, "info_and_below"],
                "level": "DEBUG",
                "stream": "ext://sys.stdout",
            },
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "filters": shared_filters,
                "level": "WARNING",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {"level": level, "handlers": ["stdout", "stderr"]},
    }


def setup_logging(
    *,
    level: str | int = "INFO",
    job_name: Optional[str] = DEFAULT_JOB_NAME,
    force: bool = False,
) -> None:
    """
    Apply the service logging configuration.

    Only the first call takes effect unless ``force`` is set, so library code
    and the entrypoint can both call it safely.
    """
    global _CONFIGURED

    if _CONFIGURED and not force:
        return
    logging.config.dictConfig(build_logging_config(level=level, job_name=job_name))
    _CONFIGURED = True


def get_tagged_logger(name: str, *, tag: Optional[str] = None) -> logging.LoggerAdapter:
    """Return a logger adapter whose records carry ``tag`` (default: last dotted segment of ``name``)."""
    return logging.LoggerAdapter(logging.getLogger(name), {"tag": tag or name.rsplit(".", 1)[-1]})


def truncate(text: str | None, limit: int = 200) -> str:
    """Shorten an upstream response body for a log line."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"
