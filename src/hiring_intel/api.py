# src/hiring_intel/api.py
"""
HTTP front door: `POST /api/search` for the browser UI.

Run with `hiring-intel serve` or `uvicorn hiring_intel.api:app`.
"""

from __future__ import annotations

from dotenv import load_dotenv
load_dotenv(override=True)

import logging
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hiring_intel.config import Settings, load_settings
from hiring_intel.errors import HiringIntelError
from hiring_intel.logging_utils import configure_logging
from hiring_intel.service import run_search

GENERIC_ERROR = "Unexpected server error while fetching hiring intelligence."

_settings = load_settings()
configure_logging(_settings.log_level)
LOG = logging.getLogger("hiring_intel.api")

app = FastAPI(title="Hiring Intel API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


class SearchBody(BaseModel):
    # Selectors stay plain strings here; service.resolve_request checks them
    jobProfile: Optional[str] = None
    geography: Optional[str] = None
    location: Optional[str] = None
    experienceLevel: Optional[str] = None
    remote: Optional[str] = None
    rapidApiKey: Optional[str] = None


def get_settings() -> Settings:
    return load_settings()


def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    return None


@app.exception_handler(HiringIntelError)
async def _hiring_intel_error(_request: Request, exc: HiringIntelError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def _invalid_body(_request: Request, exc: RequestValidationError) -> JSONResponse:
    LOG.info("Rejected search body: %s", exc.errors())
    return JSONResponse({"error": "Request body must be a JSON object of strings."}, status_code=400)


@app.get("/healthz")
def healthz() -> dict:
    return {"status": "ok"}


@app.post("/api/search")
async def search(
    body: SearchBody,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    try:
        jobs = await run_search(body.model_dump(), settings, transport=transport)
    except HiringIntelError:
        raise
    except Exception:
        LOG.exception("Search API error")
        return JSONResponse({"error": GENERIC_ERROR}, status_code=500)
    return {"jobs": jobs}
