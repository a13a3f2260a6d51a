# src/hiring_intel/service.py
"""
One search request end to end: validate the inbound payload, query JSearch,
enrich the listings.

Framework-free so both the HTTP API and the CLI go through the same path.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, List, Mapping, Optional, Sequence

import httpx

from hiring_intel.clients.clearbit import fetch_company_insight
from hiring_intel.clients.jsearch import search_jobs
from hiring_intel.config import Settings
from hiring_intel.errors import MissingCredentialError, SearchValidationError
from hiring_intel.logging_utils import log_event
from hiring_intel.models import EnrichedListing, SearchRequest
from hiring_intel.pipeline.contacts import ensure_string
from hiring_intel.pipeline.enrich import enrich_listings
from hiring_intel.pipeline.query import (
    EXPERIENCE_LEVELS,
    GEOGRAPHIES,
    REMOTE_PREFERENCES,
    build_search_params,
)

logger = logging.getLogger(__name__)


def _selector(payload: Mapping[str, Any], key: str, allowed: Sequence[str], default: str) -> str:
    value = payload.get(key) or default
    if value not in allowed:
        raise SearchValidationError(f"{key} must be one of: {', '.join(allowed)}")
    return value


def resolve_request(payload: Mapping[str, Any], default_api_key: Optional[str] = None) -> SearchRequest:
    """
    Validate and fill in defaults for an inbound search payload.

    Raises SearchValidationError for a blank job profile or location (or an
    unknown selector value) and MissingCredentialError when neither the
    payload nor the process configuration provides a RapidAPI key.
    """
    job_profile = ensure_string(payload.get("jobProfile"))
    if not job_profile:
        raise SearchValidationError("jobProfile is required")

    location = ensure_string(payload.get("location"))
    if not location:
        raise SearchValidationError("location is required")

    geography = _selector(payload, "geography", GEOGRAPHIES, "india")
    experience_level = _selector(payload, "experienceLevel", EXPERIENCE_LEVELS, "any")
    remote = _selector(payload, "remote", REMOTE_PREFERENCES, "any")

    api_key = ensure_string(payload.get("rapidApiKey")) or ensure_string(default_api_key)
    if not api_key:
        raise MissingCredentialError()

    return {
        "jobProfile": job_profile,
        "geography": geography,  # type: ignore[typeddict-item]
        "location": location,
        "experienceLevel": experience_level,  # type: ignore[typeddict-item]
        "remote": remote,  # type: ignore[typeddict-item]
        "rapidApiKey": api_key,
    }


async def run_search(
    payload: Mapping[str, Any],
    settings: Settings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[EnrichedListing]:
    """
    Run a search and return the enriched listings in provider order.

    Validation and credential errors are raised before any network call.
    A non-2xx answer from JSearch raises ProviderError. `transport` is
    handed to httpx (tests plug in a MockTransport here).
    """
    request = resolve_request(payload, settings.rapidapi_key)
    params = build_search_params(request)

    async with httpx.AsyncClient(timeout=settings.http_timeout_s, transport=transport) as client:
        raw = await search_jobs(
            request["rapidApiKey"],
            params,
            base_url=settings.jsearch_base_url,
            host=settings.jsearch_host,
            client=client,
        )
        lookup = functools.partial(
            fetch_company_insight, suggest_url=settings.company_suggest_url, client=client
        )
        jobs = await enrich_listings(raw, request["jobProfile"], lookup=lookup)

    log_event(
        logger,
        "search.completed",
        query=params["query"],
        fetched=len(raw),
        returned=len(jobs),
    )
    return jobs
