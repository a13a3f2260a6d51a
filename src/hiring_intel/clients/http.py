# src/hiring_intel/clients/http.py
"""
Shared HTTP plumbing for the provider clients.

Callers may pass their own `httpx.AsyncClient` (so one connection pool is
reused across a request, and tests can plug in `httpx.MockTransport`). When
they don't, a short-lived client is opened for the single call.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

DEFAULT_TIMEOUT_S = 20.0
USER_AGENT = "hiring-intel/0.1"


def default_headers() -> Dict[str, str]:
    return {"User-Agent": USER_AGENT, "Accept": "application/json"}


async def get(
    url: str,
    *,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
) -> httpx.Response:
    """One GET. Raises httpx.HTTPError on transport failures, never on status."""
    merged = {**default_headers(), **(headers or {})}
    if client is not None:
        return await client.get(url, params=params, headers=merged)
    async with httpx.AsyncClient(timeout=timeout) as own:
        return await own.get(url, params=params, headers=merged)
