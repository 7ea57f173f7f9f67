"""
Resume upload endpoint - stores the file and records its metadata on the user
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from remotejobs.app.core.config import Settings
from remotejobs.app.core.dependencies import get_current_user, get_db, get_settings
from remotejobs.app.core.errors import ValidationError
from remotejobs.app.core.logging_config import get_logger
from remotejobs.app.models.user import User
from remotejobs.app.schemas.user import ResumeEnvelope, resume_to_response
from remotejobs.app.services.profile_service import ProfileService

logger = get_logger("api.user.resume")
router = APIRouter()


@router.post("/resume", response_model=ResumeEnvelope)
async def upload_resume(
    resume: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """
    Upload a resume file (PDF, DOC, DOCX; 5MB max) as multipart field `resume`.

    Replaces any previous resume. Returns the stored filename, path and upload time.
    """
    if resume is None:
        raise ValidationError("No file uploaded")

    # read one byte past the limit so oversized uploads fail without buffering everything
    contents = await resume.read(settings.max_resume_bytes + 1)
    user = ProfileService(db, settings).attach_resume(
        current_user,
        resume.filename,
        contents,
        content_type=resume.content_type,
    )
    return ResumeEnvelope(resume=resume_to_response(user))
