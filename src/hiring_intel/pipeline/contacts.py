# src/hiring_intel/pipeline/contacts.py
"""
Pull contact details (emails, phone numbers, the company website) out of a
raw JSearch listing.

These are heuristics: the patterns happily match order numbers or half-broken
addresses inside a job description. Nothing here validates a contact.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from hiring_intel.models import ContactCandidate, RawListing

EMAIL_RE = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE)
PHONE_RE = re.compile(r"\+?[0-9][0-9\s().-]{6,}[0-9]")

MIN_PHONE_LENGTH = 8
MAILTO = "mailto:"


def ensure_string(value: object) -> Optional[str]:
    """Return the trimmed value if it is a non-blank string, else None."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class ContactBook:
    """
    Insertion-ordered map of contact candidates keyed by their dedup key.

    The first candidate stored under a key wins; later ones are ignored.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ContactCandidate] = {}

    def add(self, key: str, label: str, value: str) -> bool:
        if key in self._entries:
            return False
        self._entries[key] = {"label": label, "value": value}
        return True

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def to_list(self) -> List[ContactCandidate]:
        return list(self._entries.values())


def _email_sources(listing: RawListing, description: str) -> List[str]:
    emails: List[str] = []

    employer_email = ensure_string(listing.get("employer_email"))
    if employer_email:
        emails.append(employer_email)

    apply_link = ensure_string(listing.get("job_apply_link"))
    if apply_link and apply_link.startswith(MAILTO):
        emails.append(apply_link[len(MAILTO):])

    if description:
        emails.extend(EMAIL_RE.findall(description))
    return emails


def _normalize_phones(matches: Iterable[str]) -> List[str]:
    phones: List[str] = []
    for match in matches:
        normalized = re.sub(r"\s+", " ", match).strip()
        if len(normalized) >= MIN_PHONE_LENGTH and normalized not in phones:
            phones.append(normalized)
    return phones


def website_url(website: str) -> str:
    return website if website.startswith("http") else f"https://{website}"


def extract_contacts(listing: RawListing) -> List[ContactCandidate]:
    """
    Collect contact candidates for one listing.

    Order of the result: emails (employer email, mailto apply link, then
    description matches), phones found in the description, and finally the
    company website. Emails are deduplicated case-insensitively.
    """
    book = ContactBook()
    description = ensure_string(listing.get("job_description")) or ""

    for email in (e.lower() for e in _email_sources(listing, description)):
        if "@" not in email:
            continue
        label = "HR email" if "hr" in email else "Contact email"
        book.add(email, label, email)

    if description:
        for phone in _normalize_phones(PHONE_RE.findall(description)):
            # phone keys never collide with email keys
            book.add(f"phone-{phone}", "Phone", phone)

    website = ensure_string(listing.get("employer_website"))
    if website:
        book.add("website", "Company website", website_url(website))

    return book.to_list()
