"""
Authentication service business logic - registration, login, token issuance
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from remotejobs.app.core.config import Settings
from remotejobs.app.core.errors import AuthError, ConflictError, ValidationError
from remotejobs.app.core.logging_config import get_logger
from remotejobs.app.core.security import create_access_token, get_password_hash, verify_password
from remotejobs.app.models.user import User
from remotejobs.app.schemas.user import UserLogin, UserRegister
from remotejobs.app.utils.validators import (
    MIN_PASSWORD_LENGTH,
    is_blank,
    is_valid_email,
    normalize_email,
)

logger = get_logger("services.auth")

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Service for authentication operations"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def get_user(self, user_id: str) -> User | None:
        return self.db.get(User, user_id)

    def issue_token(self, user: User) -> str:
        return create_access_token(user.id, self.settings)

    def register_user(self, user_data: UserRegister) -> tuple[User, str]:
        """Create an account and return (user, token). The user is logged in after register."""
        if is_blank(user_data.name) or is_blank(user_data.email) or not user_data.password:
            raise ValidationError("Please provide name, email, and password")

        email = normalize_email(user_data.email)
        if not is_valid_email(email):
            raise ValidationError("Please enter a valid email")
        if len(user_data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

        if self.find_by_email(email):
            logger.info("Registration rejected, email exists email=%s", email)
            raise ConflictError("User already exists")

        new_user = User(
            name=user_data.name.strip(),
            email=email,
            hashed_password=get_password_hash(user_data.password, rounds=self.settings.bcrypt_rounds),
            preferences={},
        )
        self.db.add(new_user)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration of the same email
            self.db.rollback()
            raise ConflictError("User already exists")
        self.db.refresh(new_user)

        logger.info("User created user_id=%s", new_user.id)
        return new_user, self.issue_token(new_user)

    def login_user(self, login_data: UserLogin) -> tuple[User, str]:
        """Authenticate and return (user, token).

        Unknown email and wrong password fail identically so callers can't probe for accounts.
        """
        if is_blank(login_data.email) or not login_data.password:
            raise ValidationError("Please provide email and password")

        user = self.find_by_email(login_data.email)
        if not user or not verify_password(login_data.password, user.hashed_password):
            raise AuthError(INVALID_CREDENTIALS, status_code=400)

        logger.info("Login successful user_id=%s", user.id)
        return user, self.issue_token(user)

    def list_users(self) -> list[User]:
        return self.db.query(User).order_by(User.created_at).all()
