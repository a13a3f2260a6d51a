"""Shared fixtures: sample JSearch listings and settings."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from hiring_intel.config import Settings


@pytest.fixture
def acme_listing() -> Dict[str, Any]:
    return {
        "job_id": "acme-1",
        "job_title": "Backend Developer",
        "employer_name": "Acme Corp",
        "employer_website": "acme.com",
        "job_city": "Bengaluru",
        "job_state": "Karnataka",
        "job_country": "IN",
        "job_is_remote": False,
        "job_employment_type": "FULLTIME",
        "job_apply_link": "https://acme.com/careers/1",
        "job_description": "Build APIs in Python. To apply, contact hr@acme.com.",
        "job_highlights": {"Qualifications": ["3+ years of Python"]},
        "job_salary": {"currency": "INR", "salary_min": 800000, "salary_max": 1200000, "salary_period": "YEAR"},
    }


@pytest.fixture
def three_listings(acme_listing) -> List[Dict[str, Any]]:
    return [
        {"job_id": "globex-1", "job_title": "Platform Engineer", "employer_name": "Globex"},
        acme_listing,
        {"job_id": "anon-1", "job_title": "Go Developer"},
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(rapidapi_key="env-key")
