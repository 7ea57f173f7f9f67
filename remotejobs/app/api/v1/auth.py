"""
Authentication endpoints - Register, Login and the development-only user listing
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from remotejobs.app.core.config import Settings
from remotejobs.app.core.dependencies import get_db, get_settings
from remotejobs.app.core.errors import NotFoundError
from remotejobs.app.core.logging_config import get_logger
from remotejobs.app.schemas.user import (
    DebugUsersResponse,
    LoginResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
    user_to_login_payload,
    user_to_profile,
    user_to_response,
)
from remotejobs.app.services.auth_service import AuthService

logger = get_logger("api.auth")
router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new user account. The user is logged in after register.

    - **name**: Display name
    - **email**: Email address (unique, case-insensitive)
    - **password**: At least 6 characters
    """
    logger.info("Registration attempt for email=%s", user_data.email)
    user, token = AuthService(db, settings).register_user(user_data)
    return RegisterResponse(token=token, user=user_to_response(user))


@router.post("/login", response_model=LoginResponse)
def login(
    login_data: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Login user and get a bearer token plus the current saved jobs

    - **email**: User's email address
    - **password**: User's password
    """
    logger.info("Login attempt for email=%s", login_data.email)
    user, token = AuthService(db, settings).login_user(login_data)
    return LoginResponse(token=token, user=user_to_login_payload(user))


@router.get("/debug-users", response_model=DebugUsersResponse)
def debug_users(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """List every account without password hashes. Only when ENABLE_DEBUG_ROUTES is on."""
    if not settings.enable_debug_routes:
        raise NotFoundError("Not found")
    users = AuthService(db, settings).list_users()
    return DebugUsersResponse(count=len(users), users=[user_to_profile(u) for u in users])
