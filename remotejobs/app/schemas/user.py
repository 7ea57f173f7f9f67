"""
User Pydantic schemas for request/response validation
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from remotejobs.app.schemas.preferences import Preferences
from remotejobs.app.schemas.saved_job import SavedJobResponse, saved_jobs_to_response


class UserRegister(BaseModel):
    """Schema for user registration. Presence is checked by the service for a single message."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    """Schema for user login"""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public user projection - never carries the password hash"""
    id: str
    name: str
    email: str


class UserWithSavedJobs(UserResponse):
    savedJobs: List[SavedJobResponse] = Field(default_factory=list)


class RegisterResponse(BaseModel):
    success: bool = True
    token: str
    user: UserResponse


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: UserWithSavedJobs


class ResumeResponse(BaseModel):
    filename: str
    path: str
    uploadedAt: Optional[datetime] = None


class ProfileResponse(UserWithSavedJobs):
    preferences: dict = Field(default_factory=dict)
    resume: Optional[ResumeResponse] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class ProfileEnvelope(BaseModel):
    success: bool = True
    user: ProfileResponse


class ProfileUpdate(BaseModel):
    """Partial update - omitted or null fields are left untouched."""
    name: Optional[str] = None
    email: Optional[str] = None
    preferences: Optional[Preferences] = None


class ResumeEnvelope(BaseModel):
    success: bool = True
    message: str = "Resume uploaded successfully"
    resume: ResumeResponse


class DebugUsersResponse(BaseModel):
    success: bool = True
    count: int
    users: List[ProfileResponse]


def user_to_response(user) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email)


def user_to_login_payload(user) -> UserWithSavedJobs:
    return UserWithSavedJobs(
        id=user.id,
        name=user.name,
        email=user.email,
        savedJobs=saved_jobs_to_response(user.saved_jobs),
    )


def resume_to_response(user) -> Optional[ResumeResponse]:
    if not user.resume_filename:
        return None
    return ResumeResponse(
        filename=user.resume_filename,
        path=user.resume_path or "",
        uploadedAt=user.resume_uploaded_at,
    )


def user_to_profile(user) -> ProfileResponse:
    """Convert a User row into the profile payload (no password)."""
    return ProfileResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        preferences=user.preferences or {},
        resume=resume_to_response(user),
        savedJobs=saved_jobs_to_response(user.saved_jobs),
        createdAt=user.created_at,
        updatedAt=user.updated_at,
    )
