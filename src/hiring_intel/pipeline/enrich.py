# src/hiring_intel/pipeline/enrich.py
"""
Fan out over a batch of raw listings: normalize each one and look up its
company, all listings at once, then hand the results back in input order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence

from hiring_intel.logging_utils import log_event
from hiring_intel.models import UNKNOWN_COMPANY, CompanyInsight, EnrichedListing, RawListing
from hiring_intel.pipeline.normalize import normalize_listing

logger = logging.getLogger(__name__)

# Upper bound on listings enriched per request (and so on company lookups).
MAX_ENRICHED_LISTINGS = 12

CompanyLookup = Callable[[str], Awaitable[Optional[CompanyInsight]]]


async def _safe_lookup(lookup: CompanyLookup, company: str) -> Optional[CompanyInsight]:
    try:
        return await lookup(company)
    except Exception as e:
        log_event(logger, "company_lookup.raised", level=logging.WARNING, company=company, error=repr(e))
        return None


async def enrich_listing(
    listing: RawListing, fallback_title: str, lookup: CompanyLookup
) -> EnrichedListing:
    """Normalize one listing, then attach its company insight if there is one."""
    enriched = normalize_listing(listing, fallback_title)
    company = enriched["company"]
    if company != UNKNOWN_COMPANY:
        insight = await _safe_lookup(lookup, company)
        if insight is not None:
            enriched["companyInsight"] = insight
    return enriched


async def enrich_listings(
    raw: Sequence[RawListing],
    fallback_title: str,
    *,
    lookup: CompanyLookup,
    limit: int = MAX_ENRICHED_LISTINGS,
) -> List[EnrichedListing]:
    """
    Enrich the first `limit` listings concurrently.

    Listings past the limit are dropped. The result keeps the input order no
    matter which lookup finishes first; a failed lookup only costs that one
    listing its company insight. Any other error is re-raised only after
    every listing in the batch has finished.
    """
    if not raw:
        return []

    batch = list(raw[:limit])
    if len(raw) > limit:
        logger.info("Dropping %d listings beyond the first %d", len(raw) - limit, limit)

    # gather() returns results in argument order, not completion order;
    # every coroutine runs to completion before an error is re-raised
    results = await asyncio.gather(
        *(enrich_listing(item, fallback_title, lookup) for item in batch),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
