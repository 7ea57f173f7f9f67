"""
Saved-job schemas
"""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

# match the saved_jobs column sizes
JOB_ID_MAX_LENGTH = 64
SNAPSHOT_MAX_LENGTH = 255


class SaveJobIn(BaseModel):
    # feed ids are numeric; the client sends them stringified
    jobId: Optional[Union[str, int]] = None
    title: str = Field("", max_length=SNAPSHOT_MAX_LENGTH)
    company: str = Field("", max_length=SNAPSHOT_MAX_LENGTH)

    @field_validator("jobId")
    @classmethod
    def job_id_fits_column(cls, value):
        if value is not None and len(str(value).strip()) > JOB_ID_MAX_LENGTH:
            raise ValueError(f"jobId must be at most {JOB_ID_MAX_LENGTH} characters")
        return value


class SavedJobResponse(BaseModel):
    jobId: str
    title: str = ""
    company: str = ""
    savedAt: Optional[datetime] = None


class SavedJobsEnvelope(BaseModel):
    success: bool = True
    message: str
    savedJobs: List[SavedJobResponse] = Field(default_factory=list)


def saved_jobs_to_response(rows) -> List[SavedJobResponse]:
    return [
        SavedJobResponse(
            jobId=r.job_id,
            title=r.title or "",
            company=r.company or "",
            savedAt=r.saved_at,
        )
        for r in rows
    ]
