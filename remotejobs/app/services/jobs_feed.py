"""
Remote jobs feed - read-only proxy over the third-party listing API.

The raw job list is fetched with httpx, cached in Redis when configured, and filtered
per request. Nothing from the feed is written to the database.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import httpx

from remotejobs.app.core.config import DATE_POSTED_DAYS, LOCATION_KEYWORDS, NEW_JOB_DAYS, Settings
from remotejobs.app.core.errors import UpstreamError
from remotejobs.app.core.logging_config import get_logger
from remotejobs.app.utils import cache

logger = get_logger("services.jobs_feed")

CACHE_KEY = "jobs_feed:all"


@dataclass
class JobFilters:
    search: str = ""
    location: str = "any"
    job_type: str = "any"
    date_posted: str = "any"
    category: str = ""
    limit: int = 10
    offset: int = 0


def parse_publication_date(value: str) -> Optional[datetime]:
    """Feed dates come as naive ISO strings (UTC) or with an offset."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _normalize_job_type(value: str) -> str:
    return (value or "").strip().lower().replace("_", "-")


def matches_filters(job: dict, filters: JobFilters, now: datetime) -> bool:
    term = filters.search.strip().lower()
    if term:
        title = (job.get("title") or "").lower()
        company = (job.get("company_name") or "").lower()
        if term not in title and term not in company:
            return False

    if filters.location and filters.location != "any":
        location = (job.get("candidate_required_location") or "").lower()
        keywords = LOCATION_KEYWORDS.get(filters.location, (filters.location.lower(),))
        if not any(k in location for k in keywords):
            return False

    if filters.job_type and filters.job_type != "any":
        if _normalize_job_type(job.get("job_type", "")) != _normalize_job_type(filters.job_type):
            return False

    if filters.date_posted and filters.date_posted != "any":
        days = DATE_POSTED_DAYS.get(filters.date_posted)
        published = parse_publication_date(job.get("publication_date", ""))
        if days is not None and (published is None or published < now - timedelta(days=days)):
            return False

    if filters.category:
        if (job.get("category") or "").strip().lower() != filters.category.strip().lower():
            return False

    return True


def filter_jobs(jobs: list[dict], filters: JobFilters, now: datetime | None = None) -> tuple[int, list[dict]]:
    """Apply filters, flag new postings and paginate. Returns (total_matches, page)."""
    now = now or datetime.now(timezone.utc)
    matched = [j for j in jobs if matches_filters(j, filters, now)]
    page = matched[filters.offset: filters.offset + filters.limit]

    new_cutoff = now - timedelta(days=NEW_JOB_DAYS)
    result = []
    for job in page:
        published = parse_publication_date(job.get("publication_date", ""))
        result.append({**job, "isNew": bool(published and published > new_cutoff)})
    return len(matched), result


async def fetch_remote_jobs(settings: Settings) -> list[dict[str, Any]]:
    """Full job list from the upstream API, served from cache when possible."""
    cached = await cache.get(CACHE_KEY)
    if cached is not None:
        return cached

    logger.info("Fetching remote jobs url=%s", settings.remote_jobs_api_url)
    try:
        async with httpx.AsyncClient(timeout=settings.http_request_timeout) as client:
            response = await client.get(settings.remote_jobs_api_url)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Jobs API HTTP error status=%s", e.response.status_code)
        raise UpstreamError() from e
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Jobs API request failed: %s", e)
        raise UpstreamError() from e

    raw_jobs = data.get("jobs") if isinstance(data, dict) else None
    if not isinstance(raw_jobs, list):
        logger.error("Jobs API returned unexpected payload type=%s", type(data).__name__)
        raise UpstreamError()

    jobs = [j for j in raw_jobs if isinstance(j, dict)]
    if len(jobs) != len(raw_jobs):
        logger.warning("Skipped %d malformed job entries", len(raw_jobs) - len(jobs))

    await cache.set(CACHE_KEY, jobs, ttl=settings.jobs_cache_ttl)
    logger.info("Fetched %d remote jobs", len(jobs))
    return jobs


async def search_jobs(settings: Settings, filters: JobFilters) -> tuple[int, list[dict]]:
    jobs = await fetch_remote_jobs(settings)
    return filter_jobs(jobs, filters)
