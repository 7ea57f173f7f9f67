"""
Jobs feed endpoint - search and filter the third-party remote job listings
"""
from typing import Literal

from fastapi import APIRouter, Depends, Query

from remotejobs.app.core.config import Settings
from remotejobs.app.core.dependencies import get_settings
from remotejobs.app.schemas.job import JobPosting, JobsResponse
from remotejobs.app.services.jobs_feed import JobFilters, search_jobs

router = APIRouter()


@router.get("", response_model=JobsResponse)
async def list_jobs(
    search: str = Query("", description="Matches title or company, case-insensitive"),
    location: Literal["any", "us", "europe", "worldwide"] = "any",
    job_type: Literal["any", "full-time", "part-time", "contract", "freelance", "internship"] = Query(
        "any", alias="jobType"
    ),
    date_posted: Literal["any", "24h", "week", "month"] = Query("any", alias="datePosted"),
    category: str = "",
    limit: int | None = Query(None, ge=1, le=100),
    offset: int = Query(0, ge=0),
    settings: Settings = Depends(get_settings),
):
    """
    Remote job postings matching the filters, one page at a time.

    **total** is the number of matches, **count** the size of this page.
    """
    filters = JobFilters(
        search=search,
        location=location,
        job_type=job_type,
        date_posted=date_posted,
        category=category,
        limit=limit or settings.jobs_page_size,
        offset=offset,
    )
    total, jobs = await search_jobs(settings, filters)
    return JobsResponse(
        total=total,
        count=len(jobs),
        jobs=[JobPosting.model_validate(j) for j in jobs],
    )
