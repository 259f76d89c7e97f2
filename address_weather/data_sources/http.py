"""Shared HTTP plumbing for the upstream clients: session setup, fetching, JSON parsing."""
from __future__ import annotations

import json
from typing import Any

import requests
from retry_requests import retry

from address_weather.errors import MalformedResponseError, UpstreamError
from utils.logging_utils import get_tagged_logger, truncate

logger = get_tagged_logger(__name__, tag="data_sources/http")


def build_session(
    *,
    user_agent: str,
    retries: int = 0,
    backoff_factor: float = 0.2,
) -> requests.Session:
    """Return a session that identifies itself and retries 5xx responses ``retries`` times.

    With ``retries=0`` every request is a single attempt.
    """
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent, "Accept": "application/geo+json, application/json"})
    if retries:
        logger.info("Upstream requests will retry up to %d times (backoff_factor=%s)", retries, backoff_factor)
    return retry(session, retries=retries, backoff_factor=backoff_factor)


def fetch_text(session: requests.Session, url: str, *, timeout: float) -> str:
    """GET ``url`` and return the body, raising UpstreamError on transport failure or non-2xx."""
    try:
        resp = session.get(url, timeout=timeout)
    except requests.exceptions.RequestException as exc:
        raise UpstreamError(f"Request to {url} failed: {exc}", url=url) from exc

    try:
        resp.raise_for_status()
    except requests.exceptions.HTTPError as exc:
        logger.debug("Upstream error body: %s", truncate(resp.text))
        raise UpstreamError(
            f"Request to {url} returned status {resp.status_code}",
            url=url,
            status_code=resp.status_code,
        ) from exc
    return resp.text


def parse_json(text: str, *, source: str) -> Any:
    """Decode a JSON body, raising MalformedResponseError if it is not strict JSON.

    The ``NaN`` and ``Infinity`` tokens that ``json.loads`` tolerates are rejected.
    """
    def reject_constant(token: str) -> Any:
        raise MalformedResponseError(f"{source} returned non-standard JSON token {token}", source=source)

    try:
        return json.loads(text, parse_constant=reject_constant)
    except ValueError as exc:
        raise MalformedResponseError(
            f"{source} returned a body that is not JSON: {truncate(text, 80)!r}",
            source=source,
        ) from exc
