"""Squad signup email validation."""

import re

from shoresquad.models.common import ShoreSquadError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class SignupError(ShoreSquadError):
    """Raised when a signup email is missing or malformed."""


def validate_email(text: str | None) -> str:
    """Return the trimmed email, or raise SignupError."""
    email = (text or "").strip()
    if not email:
        raise SignupError("Email is required")
    if not EMAIL_RE.match(email):
        raise SignupError("Please enter a valid email address")
    return email
