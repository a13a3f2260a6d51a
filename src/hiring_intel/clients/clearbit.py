# src/hiring_intel/clients/clearbit.py
"""
Company lookup against Clearbit's keyless autocomplete endpoint.

The first suggestion is taken as the match. Every failure (bad status,
network error, junk body, no suggestions) comes back as None.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from hiring_intel.clients import http
from hiring_intel.config import DEFAULT_COMPANY_SUGGEST_URL
from hiring_intel.logging_utils import log_event
from hiring_intel.models import CompanyInsight

logger = logging.getLogger(__name__)

TWITTER_BASE = "https://twitter.com/"
LINKEDIN_BASE = "https://www.linkedin.com/"


def _profile_url(base: str, social: Any) -> Optional[str]:
    if isinstance(social, dict) and social.get("handle"):
        return f"{base}{social['handle']}"
    return None


def to_company_insight(suggestion: Dict[str, Any]) -> CompanyInsight:
    return {
        "name": suggestion.get("name"),
        "domain": suggestion.get("domain"),
        "description": suggestion.get("description"),
        "logo": suggestion.get("logo"),
        "location": suggestion.get("location"),
        "twitter": _profile_url(TWITTER_BASE, suggestion.get("twitter")),
        "linkedin": _profile_url(LINKEDIN_BASE, suggestion.get("linkedin")),
    }


async def fetch_company_insight(
    name: str,
    *,
    suggest_url: str = DEFAULT_COMPANY_SUGGEST_URL,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = http.DEFAULT_TIMEOUT_S,
) -> Optional[CompanyInsight]:
    try:
        response = await http.get(
            suggest_url, params={"query": name}, client=client, timeout=timeout
        )
        if not response.is_success:
            log_event(logger, "company_lookup.failed", level=logging.WARNING,
                      company=name, status=response.status_code)
            return None
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        log_event(logger, "company_lookup.failed", level=logging.WARNING, company=name, error=repr(e))
        return None

    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        logger.debug("No company suggestions for %r", name)
        return None

    insight = to_company_insight(data[0])
    return {k: v for k, v in insight.items() if v is not None}  # type: ignore[return-value]
