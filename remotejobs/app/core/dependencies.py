"""
Dependency injection utilities
"""
from typing import Iterator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from remotejobs.app.core.config import Settings
from remotejobs.app.core.errors import AuthError
from remotejobs.app.core.security import decode_access_token
from remotejobs.app.models.user import User
from remotejobs.app.services.auth_service import AuthService

security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Session]:
    """Get database session"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the bearer token to a stored user. Read-only gate for protected routes."""
    if not credentials or not credentials.credentials:
        raise AuthError("Not authenticated")
    user_id = decode_access_token(credentials.credentials, settings)
    user = AuthService(db, settings).get_user(user_id)
    if not user:
        raise AuthError("User not found")
    return user
