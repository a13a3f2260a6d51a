# src/hiring_intel/models.py
"""
Lightweight typed dictionaries for job records, both as they come from
JSearch / Clearbit and as we hand them back to callers.

Everything is a plain dict with type hints. No validation is enforced:
the provider may leave out any key, so readers must use `.get()`.
"""

from typing import List, Literal, Optional, TypedDict

Geography = Literal["india", "global"]
ExperienceLevel = Literal["any", "entry", "mid", "senior", "lead"]
RemotePreference = Literal["any", "remote", "on-site", "hybrid"]

# Placeholder company name when the listing carries no employer name.
UNKNOWN_COMPANY = "Unknown company"


class JobHighlights(TypedDict, total=False):
    Qualifications: List[str]
    Responsibilities: List[str]
    Benefits: List[str]


class SalaryInfo(TypedDict, total=False):
    """
    Salary sub-record. JSearch emits one of two naming conventions:
    `salary_min` / `salary_max` / `salary_period` (preferred) or
    `min_salary` / `max_salary` / `period`.
    """

    currency: str
    salary_min: float
    salary_max: float
    salary_period: str
    min_salary: float
    max_salary: float
    period: str


class RawListing(TypedDict, total=False):
    """One job posting exactly as JSearch returns it. Any key may be missing."""

    job_id: str
    job_title: str
    employer_name: str
    employer_website: str
    employer_email: str
    job_city: str
    job_state: str
    job_country: str
    job_is_remote: bool
    job_employment_type: str
    job_apply_link: str
    job_description: str
    job_highlights: JobHighlights
    job_salary: SalaryInfo

    # Posting time, in order of preference
    job_posted_at_datetime_utc: str
    job_posted_at: str
    job_posted_at_timestamp: int  # epoch seconds


class ContactCandidate(TypedDict):
    # "HR email", "Contact email", "Phone" or "Company website"
    label: str
    value: str


class CompanyInsight(TypedDict, total=False):
    name: str
    domain: Optional[str]
    description: Optional[str]
    logo: Optional[str]
    location: Optional[str]
    linkedin: Optional[str]  # full profile URL
    twitter: Optional[str]  # full profile URL


class EnrichedListing(TypedDict, total=False):
    """
    The unit we return to callers. Keys are camelCase because this dict is
    serialized as-is into the API response. Optional keys are left out
    entirely when there is nothing to report.
    """

    id: str
    title: str
    company: str
    city: str
    state: str
    country: str
    remote: bool
    employmentType: str
    salary: str
    applyLink: str
    description: str
    highlights: List[str]
    postedAt: str
    contacts: List[ContactCandidate]
    companyInsight: CompanyInsight


class SearchRequest(TypedDict):
    """A search request after trimming, defaulting and credential resolution."""

    jobProfile: str
    geography: Geography
    location: str
    experienceLevel: ExperienceLevel
    remote: RemotePreference
    rapidApiKey: str
