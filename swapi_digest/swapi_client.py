"""Fetch single SWAPI resources with a path-keyed cache and error counting."""
from __future__ import annotations

from typing import Any

import requests

from swapi_digest.app_types import FetchContext
from swapi_digest.errors import (
    FetchTimeoutError,
    HttpStatusError,
    MalformedPayloadError,
    TransportError,
)
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="swapi_client")

session = requests.Session()

HTTP_ERROR_THRESHOLD = 400
_MISSING = object()


def build_url(base_url: str, path: str) -> str:
    """Join the API base and a resource path such as 'starships/?page=1'."""
    return f"{base_url}{path.lstrip('/')}"


def fetch(path: str, context: FetchContext) -> Any:
    """
    Return the decoded JSON payload for `path`.

    A cached payload is returned without touching the network. On any failure
    the error counter is incremented exactly once, nothing is cached, and a
    FetchError subclass is raised.
    """
    cached = context.cache.get(path, _MISSING)
    if cached is not _MISSING:
        if context.debug:
            logger.info("Using cached data for %s", path)
        return cached

    url = build_url(context.base_url, path)
    timeout_s = context.timeout_ms / 1000
    if context.debug:
        logger.info("GET %s (timeout %d ms)", url, context.timeout_ms)

    try:
        resp = session.get(url, timeout=timeout_s, verify=context.verify_tls)
    except requests.exceptions.Timeout as exc:
        context.metrics.record_error()
        logger.warning("Request for %s timed out: %s", path, exc)
        raise FetchTimeoutError(path, context.timeout_ms) from exc
    except requests.exceptions.RequestException as exc:
        context.metrics.record_error()
        logger.warning("Request for %s failed: %s", path, exc)
        raise TransportError(path, str(exc)) from exc

    if resp.status_code >= HTTP_ERROR_THRESHOLD:
        context.metrics.record_error()
        raise HttpStatusError(path, resp.status_code)

    try:
        payload = resp.json()
    except ValueError as exc:
        context.metrics.record_error()
        raise MalformedPayloadError(path, str(exc)) from exc

    context.cache.put(path, payload)
    if context.debug:
        logger.info("Successfully fetched data for %s", path)
        logger.info("Cache size: %d", context.cache.size())
    return payload
