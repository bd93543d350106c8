from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import requests

from ..core.schemas import FetchResult


logger = logging.getLogger(__name__)

# Signature shared by fetch_json and the fakes used in tests.
Fetcher = Callable[..., FetchResult]


def fetch_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout_s: float = 30,
) -> FetchResult:
    """GET `url` and return the parsed JSON object.

    Network errors, non-2xx responses and unparsable bodies are logged and
    returned as a failed FetchResult instead of being raised.
    """
    try:
        r = requests.get(url, params=params, timeout=timeout_s)
        r.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Request error for %s: %s", url, exc)
        return FetchResult.failure(str(exc))

    try:
        data = r.json()
    except ValueError as exc:
        logger.error("Invalid JSON from %s: %s", url, exc)
        return FetchResult.failure(f"invalid JSON: {exc}")

    if not isinstance(data, dict):
        logger.error("Unexpected JSON from %s: %s", url, type(data).__name__)
        return FetchResult.failure(f"expected a JSON object, got {type(data).__name__}")
    return FetchResult.success(data)
