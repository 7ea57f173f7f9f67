"""
User database model - account credentials, profile fields and resume metadata
"""
import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.orm import relationship

from remotejobs.app.db.base import Base


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_user_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lowercased
    hashed_password = Column(String(255), nullable=False)

    preferences = Column(JSON, default=dict, nullable=False)

    resume_filename = Column(String(255), nullable=True)
    resume_path = Column(String(1024), nullable=True)
    resume_uploaded_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    saved_jobs = relationship(
        "SavedJob",
        back_populates="user",
        order_by="SavedJob.id",
        cascade="all, delete-orphan",
    )
