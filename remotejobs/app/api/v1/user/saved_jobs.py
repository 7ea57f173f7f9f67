"""
Saved jobs endpoints - bookmark and un-bookmark postings from the jobs feed
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from remotejobs.app.core.dependencies import get_current_user, get_db
from remotejobs.app.models.user import User
from remotejobs.app.schemas.saved_job import SaveJobIn, SavedJobsEnvelope, saved_jobs_to_response
from remotejobs.app.services.saved_jobs_service import SavedJobsService

router = APIRouter()


@router.get("/saved-jobs", response_model=SavedJobsEnvelope)
def list_saved_jobs(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    rows = SavedJobsService(db).list_saved_jobs(current_user)
    return SavedJobsEnvelope(message="Saved jobs", savedJobs=saved_jobs_to_response(rows))


@router.post("/save-job", response_model=SavedJobsEnvelope)
def save_job(
    payload: SaveJobIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Save a job. Returns the full list; saving the same jobId twice is a 400."""
    rows = SavedJobsService(db).save_job(current_user, payload.jobId, payload.title, payload.company)
    return SavedJobsEnvelope(message="Job saved successfully", savedJobs=saved_jobs_to_response(rows))


@router.delete("/saved-jobs/{job_id}", response_model=SavedJobsEnvelope)
def unsave_job(
    job_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Remove a saved job. Unknown ids are ignored."""
    rows = SavedJobsService(db).unsave_job(current_user, job_id)
    return SavedJobsEnvelope(message="Job removed from saved jobs", savedJobs=saved_jobs_to_response(rows))
