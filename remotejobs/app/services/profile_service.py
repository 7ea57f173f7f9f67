"""
Profile service - read/update the user record and attach resume metadata
"""
import time
from datetime import datetime
from pathlib import Path

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from remotejobs.app.core.config import ALLOWED_RESUME_EXTENSIONS, Settings
from remotejobs.app.core.errors import ConflictError, ValidationError
from remotejobs.app.core.logging_config import get_logger
from remotejobs.app.models.user import User
from remotejobs.app.schemas.preferences import preferences_to_dict
from remotejobs.app.schemas.user import ProfileUpdate
from remotejobs.app.services.storage_service import delete_stored_resume, store_resume
from remotejobs.app.utils.validators import is_blank, is_valid_email, normalize_email

logger = get_logger("services.profile")


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def validate_resume_upload(filename: str | None, size: int, max_bytes: int) -> str:
    """Check extension and size before anything is stored. Returns the lowercased suffix."""
    if not filename or size == 0:
        raise ValidationError("No file uploaded")
    suffix = Path(filename).suffix.lower()
    if suffix not in ALLOWED_RESUME_EXTENSIONS:
        raise ValidationError("Only PDF and DOC files are allowed")
    if size > max_bytes:
        raise ValidationError(f"File too large. Maximum size is {max_bytes // 1_000_000}MB")
    return suffix


class ProfileService:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def get_profile(self, user: User) -> User:
        self.db.refresh(user)
        return user

    def update_profile(self, user: User, payload: ProfileUpdate) -> User:
        """Apply only the fields the caller sent."""
        data = payload.model_dump(exclude_unset=True)

        if data.get("name") is not None:
            if is_blank(data["name"]):
                raise ValidationError("Name cannot be empty")
            user.name = data["name"].strip()

        if data.get("email") is not None:
            email = normalize_email(data["email"])
            if not is_valid_email(email):
                raise ValidationError("Please enter a valid email")
            user.email = email

        if payload.preferences is not None:
            user.preferences = preferences_to_dict(payload.preferences)

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Email already in use")
        self.db.refresh(user)
        logger.info("Profile updated user_id=%s fields=%s", user.id, sorted(data))
        return user

    def attach_resume(
        self,
        user: User,
        filename: str | None,
        contents: bytes,
        content_type: str | None = None,
    ) -> User:
        """Validate, store and record a resume, replacing any previous one."""
        suffix = validate_resume_upload(filename, len(contents), self.settings.max_resume_bytes)

        stored_name = f"{user.id}-{_timestamp_ms()}{suffix}"
        stored_path = store_resume(
            self.settings,
            contents,
            stored_name,
            user.id,
            mime_type=content_type or "application/octet-stream",
        )

        previous_path = user.resume_path
        user.resume_filename = stored_name
        user.resume_path = stored_path
        user.resume_uploaded_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(user)
        logger.info("Resume attached user_id=%s path=%s size_bytes=%d", user.id, stored_path, len(contents))

        if previous_path and previous_path != stored_path:
            delete_stored_resume(self.settings, previous_path, user.id)
        return user
