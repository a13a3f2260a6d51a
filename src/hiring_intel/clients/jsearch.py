# src/hiring_intel/clients/jsearch.py

"""
Plain-function client for the JSearch API on RapidAPI.

- Keep all HTTP details for the search provider here.
- Return the raw listing dicts; normalization happens in the pipeline.
- No retries: a failed search is reported to the caller with the provider's
  status code.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from hiring_intel.clients import http
from hiring_intel.config import DEFAULT_JSEARCH_BASE_URL, DEFAULT_JSEARCH_HOST
from hiring_intel.errors import ProviderError
from hiring_intel.models import RawListing

logger = logging.getLogger(__name__)


def _search_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/search"


def _rapidapi_headers(api_key: str, host: str) -> Dict[str, str]:
    return {"X-RapidAPI-Key": api_key, "X-RapidAPI-Host": host}


def _error_message(response: httpx.Response) -> Optional[str]:
    # JSearch error bodies look like {"message": "..."}; anything else is ignored
    try:
        detail = response.json()
    except ValueError:
        return None
    if isinstance(detail, dict):
        message = detail.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


async def search_jobs(
    api_key: str,
    params: Dict[str, str],
    *,
    base_url: str = DEFAULT_JSEARCH_BASE_URL,
    host: str = DEFAULT_JSEARCH_HOST,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = http.DEFAULT_TIMEOUT_S,
) -> List[RawListing]:
    """
    Fetch one page of JSearch results and return the raw `data` list.

    Arguments:
    - api_key: RapidAPI key (never logged).
    - params: query string built by `pipeline.query.build_search_params`.

    Raises:
    - ProviderError if JSearch answers with a non-2xx status.
    - httpx.HTTPError on network failures.
    """
    response = await http.get(
        _search_url(base_url),
        params=params,
        headers=_rapidapi_headers(api_key, host),
        client=client,
        timeout=timeout,
    )
    logger.info("JSearch request: query=%r status=%s", params.get("query"), response.status_code)

    if not response.is_success:
        message = _error_message(response)
        logger.error("JSearch error: status=%s message=%s", response.status_code, message)
        raise ProviderError(response.status_code, message)

    body: Any = response.json()
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, dict)]
