# src/hiring_intel/pipeline/normalize.py
"""
Convert one raw JSearch listing into our EnrichedListing shape.

JSearch records are sparse and use more than one naming convention for the
same field (see SalaryInfo). All of the fallback order lives here so the rest
of the code only ever sees the normalized dict.
"""

from __future__ import annotations

import math
import uuid
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from babel.dates import format_date
from babel.numbers import format_currency
from dateutil import parser as date_parser

from hiring_intel.models import UNKNOWN_COMPANY, EnrichedListing, RawListing
from hiring_intel.pipeline.contacts import ensure_string, extract_contacts

DEFAULT_CURRENCY = "INR"
MAX_HIGHLIGHTS = 6
HIGHLIGHT_SECTIONS = ("Qualifications", "Responsibilities", "Benefits")

# en_IN grouping (12,00,000) with the fraction digits dropped
CURRENCY_PATTERN = "¤#,##,##0"
CURRENCY_LOCALE = "en_IN"

_DAY_S = 24 * 60 * 60
_HOUR_S = 60 * 60


# ---- Salary -------------------------------------------------------------------

def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _first_present(record: Dict[str, Any], *keys: str) -> Any:
    # first key whose value is not None, even if it is falsy (0, "")
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def format_money(amount: float, currency: str) -> str:
    return format_currency(
        amount,
        currency,
        format=CURRENCY_PATTERN,
        locale=CURRENCY_LOCALE,
        currency_digits=False,
    )


def format_salary(listing: RawListing) -> Optional[str]:
    """
    Render the salary as "₹8,00,000 - ₹12,00,000 / year".

    Returns None when neither a minimum nor a maximum amount is set (zero
    counts as not set).
    """
    salary = listing.get("job_salary")
    if not salary or not isinstance(salary, dict):
        return None

    low = _to_number(_first_present(salary, "salary_min", "min_salary"))
    high = _to_number(_first_present(salary, "salary_max", "max_salary"))
    period = _first_present(salary, "salary_period", "period")

    if not low and not high:
        return None

    currency = salary.get("currency") or DEFAULT_CURRENCY
    suffix = f" / {period}" if period else ""

    if low and high:
        return f"{format_money(low, currency)} - {format_money(high, currency)}{suffix}"

    return f"{format_money(low or high, currency)}{suffix}"


# ---- Posting age --------------------------------------------------------------

# dateutil fills missing date parts from `default`; two defaults that differ
# in year, month and day expose any part the string did not carry
_SENTINEL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _as_utc(parsed: datetime) -> datetime:
    # naive means UTC
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_iso(raw: str) -> Optional[datetime]:
    try:
        return _as_utc(date_parser.isoparse(raw))
    except (ValueError, OverflowError):
        return None


def _parse_full_date(raw: str) -> Optional[datetime]:
    """Parse a free-form date string, or None unless it names year, month and day."""
    try:
        first, second = (date_parser.parse(raw, default=d) for d in _SENTINEL_DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first != second:
        return None
    return _as_utc(first)


def _from_epoch(value: Any) -> Optional[datetime]:
    number = _to_number(value)
    if number is None:
        return None
    try:
        return datetime.fromtimestamp(number, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def resolve_posted_at(listing: RawListing) -> Optional[datetime]:
    """
    Find when the listing was posted: the ISO field first, then the generic
    posted-at string, then epoch seconds (number or numeric string).
    """
    iso = ensure_string(listing.get("job_posted_at_datetime_utc"))
    if iso:
        parsed = _parse_iso(iso)
        if parsed is not None:
            return parsed

    generic = ensure_string(listing.get("job_posted_at"))
    if generic:
        parsed = _parse_full_date(generic)
        if parsed is not None:
            return parsed

    timestamp = listing.get("job_posted_at_timestamp")
    if isinstance(timestamp, str):
        timestamp = ensure_string(timestamp)
    return _from_epoch(timestamp)


def short_date(value: date) -> str:
    # e.g. "Oct 9, 2026"
    return format_date(value, "MMM d, y", locale="en")


def format_posted(listing: RawListing, now: Optional[datetime] = None) -> Optional[str]:
    posted = resolve_posted_at(listing)
    if posted is None:
        return None

    now = now or datetime.now(timezone.utc)
    elapsed = (now - posted).total_seconds()
    days = math.floor(elapsed / _DAY_S)

    if days < 1:
        hours = math.floor(elapsed / _HOUR_S)
        return "Posted less than an hour ago" if hours <= 1 else f"Posted {hours}h ago"

    if days < 7:
        return "Posted yesterday" if days == 1 else f"Posted {days} days ago"

    return short_date(posted.astimezone(timezone.utc).date())


# ---- Highlights ---------------------------------------------------------------

def collect_highlights(listing: RawListing) -> List[str]:
    highlights = listing.get("job_highlights")
    if not isinstance(highlights, dict):
        return []
    out: List[str] = []
    for section in HIGHLIGHT_SECTIONS:
        entries = highlights.get(section)
        if isinstance(entries, list):
            out.extend(e for e in entries if isinstance(e, str))
    return out[:MAX_HIGHLIGHTS]


# ---- Listing ------------------------------------------------------------------

def company_name(listing: RawListing) -> str:
    return ensure_string(listing.get("employer_name")) or UNKNOWN_COMPANY


def normalize_listing(listing: RawListing, fallback_title: str) -> EnrichedListing:
    """
    Map one JSearch record to an EnrichedListing (without company insight).

    `fallback_title` is the job profile the user searched for; it stands in
    when the record has no title. The returned "company" is either the
    employer name or UNKNOWN_COMPANY, which tells the caller whether a
    company lookup makes sense.
    """
    out: Dict[str, Any] = {
        "id": ensure_string(listing.get("job_id")) or str(uuid.uuid4()),
        "title": ensure_string(listing.get("job_title")) or fallback_title,
        "company": company_name(listing),
        "city": ensure_string(listing.get("job_city")),
        "state": ensure_string(listing.get("job_state")),
        "country": ensure_string(listing.get("job_country")),
        "remote": bool(listing.get("job_is_remote")),
        "employmentType": ensure_string(listing.get("job_employment_type")),
        "salary": format_salary(listing),
        "applyLink": ensure_string(listing.get("job_apply_link")),
        "description": ensure_string(listing.get("job_description")),
        "highlights": collect_highlights(listing),
        "postedAt": format_posted(listing),
        "contacts": extract_contacts(listing),
    }
    # absent optionals are dropped, not sent as null
    return {k: v for k, v in out.items() if v is not None}  # type: ignore[return-value]
