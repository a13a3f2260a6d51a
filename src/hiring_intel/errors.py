# src/hiring_intel/errors.py
"""
Errors that abort a search request. Each one knows the HTTP status it maps
to and carries a message that is safe to show the caller.

A failed company lookup never raises; it degrades to "no company insight"
for that one listing.
"""

from __future__ import annotations

from typing import Optional


class HiringIntelError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SearchValidationError(HiringIntelError):
    """A required field is missing or blank, or a selector is unknown."""

    status_code = 400


class MissingCredentialError(HiringIntelError):
    status_code = 401

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or "RapidAPI key missing. Provide it in the request or configure RAPIDAPI_KEY."
        )


class ProviderError(HiringIntelError):
    """JSearch answered with a non-2xx status. The status is forwarded as-is."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or f"JSearch API returned {status_code}. Check RapidAPI quota and key."
        )
        self.status_code = status_code
