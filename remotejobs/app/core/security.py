"""
Password hashing and session token helpers.

Passwords go through bcrypt directly; tokens are HS256 JWTs whose subject is the user id.
"""
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from remotejobs.app.core.config import Settings
from remotejobs.app.core.errors import AuthError

# bcrypt ignores everything past 72 bytes; newer builds raise instead
BCRYPT_MAX_BYTES = 72


def get_password_hash(password: str, rounds: int = 10) -> str:
    """Hash a password with a fresh salt. `rounds` is the bcrypt cost factor."""
    pw_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    hashed = bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    if not password or not hashed:
        return False
    pw_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def create_access_token(
    subject: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT for `subject` expiring after `expires_delta` (default from settings)."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": str(subject), "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> str:
    """Verify signature and expiry and return the token subject. Raises AuthError."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise AuthError("Invalid or expired token")
    subject = payload.get("sub")
    if not subject:
        raise AuthError("Invalid token")
    return subject
