"""
Saved jobs service - per-user, insertion-ordered list of bookmarked postings
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from remotejobs.app.core.errors import ConflictError, ValidationError
from remotejobs.app.core.logging_config import get_logger
from remotejobs.app.models.saved_job import SavedJob
from remotejobs.app.models.user import User

logger = get_logger("services.saved_jobs")


class SavedJobsService:
    def __init__(self, db: Session):
        self.db = db

    def list_saved_jobs(self, user: User) -> list[SavedJob]:
        return (
            self.db.query(SavedJob)
            .filter(SavedJob.user_id == user.id)
            .order_by(SavedJob.id.asc())
            .all()
        )

    def save_job(self, user: User, job_id, title: str = "", company: str = "") -> list[SavedJob]:
        """Append a job to the user's list. Saving the same job twice is an error, not a no-op."""
        job_id = str(job_id).strip() if job_id is not None else ""
        if not job_id:
            raise ValidationError("Please provide jobId")

        exists = (
            self.db.query(SavedJob.id)
            .filter(SavedJob.user_id == user.id, SavedJob.job_id == job_id)
            .first()
        )
        if exists:
            raise ConflictError("Job already saved")

        self.db.add(SavedJob(user_id=user.id, job_id=job_id, title=title or "", company=company or ""))
        try:
            self.db.commit()
        except IntegrityError:
            # concurrent save of the same job slipped past the check; the constraint caught it
            self.db.rollback()
            raise ConflictError("Job already saved")

        logger.info("Job saved user_id=%s job_id=%s", user.id, job_id)
        self.db.expire(user, ["saved_jobs"])
        return self.list_saved_jobs(user)

    def unsave_job(self, user: User, job_id: str) -> list[SavedJob]:
        """Remove a job from the list. Absent ids are ignored."""
        deleted = (
            self.db.query(SavedJob)
            .filter(SavedJob.user_id == user.id, SavedJob.job_id == str(job_id))
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info("Job unsaved user_id=%s job_id=%s", user.id, job_id)
        self.db.expire(user, ["saved_jobs"])
        return self.list_saved_jobs(user)
