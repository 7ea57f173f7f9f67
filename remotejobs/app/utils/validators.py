"""
Input normalization shared by registration, profile update and subscription.
"""
import re

# no nested quantifiers; domain labels are separated by literal dots
EMAIL_PATTERN = re.compile(r"^[\w.+-]+@[\w-]+(\.[\w-]+)*\.\w{2,}$")
MAX_EMAIL_LENGTH = 254

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str | None) -> str:
    """Trim and lowercase; emails are unique case-insensitively."""
    return (email or "").strip().lower()


def is_valid_email(email: str) -> bool:
    if not email or len(email) > MAX_EMAIL_LENGTH:
        return False
    return EMAIL_PATTERN.match(email) is not None


def is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()
