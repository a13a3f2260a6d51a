# src/hiring_intel/cli.py
"""
Command-line interface for hiring-intel.

This module provides CLI commands to:
- Run one search against JSearch and print the enriched listings
- List suggested job profiles
- List the Indian states accepted as a location for the "india" geography
- Serve the HTTP API
"""

from dotenv import load_dotenv
load_dotenv(override=True)  # automatically looks for a .env file in the project root

import asyncio
import json
from typing import List, Optional

import typer

from hiring_intel.config import load_settings
from hiring_intel.errors import HiringIntelError
from hiring_intel.logging_utils import configure_logging
from hiring_intel.models import EnrichedListing
from hiring_intel.pipeline.query import INDIAN_STATES, JOB_PROFILES, format_location
from hiring_intel.service import run_search

# Typer app instance for CLI commands
app = typer.Typer(help="Job search with contact and company enrichment")


def render_listing(job: EnrichedListing) -> str:
    """Short multi-line summary of one listing for the terminal."""
    lines: List[str] = [
        f"{job.get('title')} @ {job.get('company')}",
        f"  {format_location(job)} | {'Remote or Hybrid' if job.get('remote') else 'On-site'}",
    ]
    if job.get("employmentType"):
        lines.append(f"  Type: {job['employmentType']}")
    if job.get("salary"):
        lines.append(f"  Salary: {job['salary']}")
    if job.get("postedAt"):
        lines.append(f"  {job['postedAt']}")
    for contact in job.get("contacts", []):
        lines.append(f"  {contact['label']}: {contact['value']}")
    insight = job.get("companyInsight")
    if insight and insight.get("domain"):
        lines.append(f"  Company domain: {insight['domain']}")
    if job.get("applyLink"):
        lines.append(f"  Apply: {job['applyLink']}")
    return "\n".join(lines)


@app.command()
def search(
    job_profile: str = typer.Argument(..., help="Role to search for, e.g. 'Backend Developer'"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Indian state or free-text location"),
    geography: str = typer.Option("india", "--geography", help="india | global"),
    experience: str = typer.Option("any", "--experience", help="any | entry | mid | senior | lead"),
    remote: str = typer.Option("any", "--remote", help="any | remote | on-site | hybrid"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="RapidAPI key (defaults to RAPIDAPI_KEY)"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
):
    """
    Search JSearch → normalize → extract contacts → look up companies → print.
    """
    settings = load_settings()
    configure_logging(settings.log_level)

    payload = {
        "jobProfile": job_profile,
        "location": location,
        "geography": geography,
        "experienceLevel": experience,
        "remote": remote,
        "rapidApiKey": api_key,
    }

    try:
        jobs = asyncio.run(run_search(payload, settings))
    except HiringIntelError as e:
        typer.echo(f"Error ({e.status_code}): {e.message}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps({"jobs": jobs}, indent=2, ensure_ascii=False))
        return

    typer.echo(f"Found {len(jobs)} listings.")
    for job in jobs:
        typer.echo("")
        typer.echo(render_listing(job))


@app.command()
def profiles(
    contains: str = typer.Argument("", help="Only show profiles containing this text"),
):
    """
    Print the suggested job profiles for the JOB_PROFILE argument of `search`.
    """
    needle = contains.strip().lower()
    for profile in JOB_PROFILES:
        if needle in profile.lower():
            typer.echo(profile)


@app.command()
def states():
    """
    Print the Indian states and union territories accepted as --location.
    """
    for state in INDIAN_STATES:
        typer.echo(state)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
):
    """
    Serve the HTTP API (POST /api/search) with uvicorn.
    """
    import uvicorn

    uvicorn.run("hiring_intel.api:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
