# src/hiring_intel/pipeline/query.py
"""
Turn a search request into the JSearch query string and parameters.
"""

from typing import Dict, List, Mapping, Optional

from hiring_intel.models import SearchRequest

GEOGRAPHIES = ("india", "global")
EXPERIENCE_LEVELS = ("any", "entry", "mid", "senior", "lead")
REMOTE_PREFERENCES = ("any", "remote", "on-site", "hybrid")

# Suggested job profiles; any other free-text profile is accepted too
JOB_PROFILES = (
    "Software Engineer",
    "Frontend Developer",
    "Backend Developer",
    "Full Stack Developer",
    "Data Scientist",
    "Machine Learning Engineer",
    "Product Manager",
    "UI/UX Designer",
    "DevOps Engineer",
    "QA Engineer",
    "Cybersecurity Analyst",
    "Business Analyst",
    "Mobile App Developer",
    "Cloud Architect",
    "Digital Marketing Manager",
)

# Used as `location` when geography is "india"
INDIAN_STATES = (
    "Andhra Pradesh",
    "Arunachal Pradesh",
    "Assam",
    "Bihar",
    "Chhattisgarh",
    "Goa",
    "Gujarat",
    "Haryana",
    "Himachal Pradesh",
    "Jharkhand",
    "Karnataka",
    "Kerala",
    "Madhya Pradesh",
    "Maharashtra",
    "Manipur",
    "Meghalaya",
    "Mizoram",
    "Nagaland",
    "Odisha",
    "Punjab",
    "Rajasthan",
    "Sikkim",
    "Tamil Nadu",
    "Telangana",
    "Tripura",
    "Uttar Pradesh",
    "Uttarakhand",
    "West Bengal",
    "Delhi",
    "Jammu and Kashmir",
    "Ladakh",
    "Puducherry",
    "Chandigarh",
    "Dadra and Nagar Haveli and Daman and Diu",
    "Andaman and Nicobar Islands",
    "Lakshadweep",
)


def build_query(request: SearchRequest) -> str:
    """
    Free-text query, e.g. "Backend Developer Karnataka senior level remote India".
    """
    parts: List[str] = [request["jobProfile"], request["location"]]

    if request["experienceLevel"] != "any":
        parts.append(f"{request['experienceLevel']} level")

    if request["remote"] != "any":
        parts.append(request["remote"])

    if request["geography"] == "india":
        parts.append("India")

    return " ".join(p for p in parts if p)


def build_search_params(request: SearchRequest) -> Dict[str, str]:
    params = {
        "query": build_query(request),
        "page": "1",
        "num_pages": "1",
    }
    if request["remote"] == "remote":
        params["remote_jobs_only"] = "true"
    elif request["remote"] == "on-site":
        params["remote_jobs_only"] = "false"
    return params


def format_location(listing: Mapping[str, object]) -> str:
    """One-line location for display: "Bengaluru, Karnataka · India"."""
    city_state = ", ".join(str(p) for p in (listing.get("city"), listing.get("state")) if p)
    segments: List[Optional[str]] = [city_state, listing.get("country")]  # type: ignore[list-item]
    shown = [str(s) for s in segments if s]
    return " · ".join(shown) if shown else "Location confidential"
