# src/hiring_intel/config.py
"""
Process-wide settings, read from the environment.

Entry points (the CLI and the API module) call `load_dotenv` first, so a
`.env` file in the project root works the same as exported variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_JSEARCH_BASE_URL = "https://jsearch.p.rapidapi.com"
DEFAULT_JSEARCH_HOST = "jsearch.p.rapidapi.com"
DEFAULT_COMPANY_SUGGEST_URL = "https://autocomplete.clearbit.com/v1/companies/suggest"


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_float(name: str, default: float) -> float:
    raw = env_str(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def parse_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    rapidapi_key: Optional[str] = None
    jsearch_base_url: str = DEFAULT_JSEARCH_BASE_URL
    jsearch_host: str = DEFAULT_JSEARCH_HOST
    company_suggest_url: str = DEFAULT_COMPANY_SUGGEST_URL
    http_timeout_s: float = 20.0
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])


def load_settings() -> Settings:
    return Settings(
        rapidapi_key=env_str("RAPIDAPI_KEY"),
        jsearch_base_url=env_str("JSEARCH_BASE_URL", DEFAULT_JSEARCH_BASE_URL).rstrip("/"),
        jsearch_host=env_str("JSEARCH_HOST", DEFAULT_JSEARCH_HOST),
        company_suggest_url=env_str("COMPANY_SUGGEST_URL", DEFAULT_COMPANY_SUGGEST_URL),
        http_timeout_s=env_float("HTTP_TIMEOUT_S", 20.0),
        log_level=(env_str("LOG_LEVEL", "INFO") or "INFO").upper(),
        cors_origins=parse_csv(env_str("CORS_ORIGINS", "http://localhost:3000")),
    )
