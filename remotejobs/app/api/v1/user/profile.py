"""
Profile endpoints - GET and PUT the current user's profile
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from remotejobs.app.core.config import Settings
from remotejobs.app.core.dependencies import get_current_user, get_db, get_settings
from remotejobs.app.models.user import User
from remotejobs.app.schemas.user import ProfileEnvelope, ProfileUpdate, user_to_profile
from remotejobs.app.services.profile_service import ProfileService

router = APIRouter()


@router.get("/profile", response_model=ProfileEnvelope)
def get_profile(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """Get current user's profile, including saved jobs and resume metadata."""
    user = ProfileService(db, settings).get_profile(current_user)
    return ProfileEnvelope(user=user_to_profile(user))


@router.put("/profile", response_model=ProfileEnvelope)
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
):
    """Partially update name, email and/or preferences."""
    user = ProfileService(db, settings).update_profile(current_user, payload)
    return ProfileEnvelope(user=user_to_profile(user))
