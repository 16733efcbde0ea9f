"""Domain helpers for user field validation."""
from __future__ import annotations

import re
from typing import Any

from .errors import ValidationError

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@(.+)")
MIN_AGE = 0
MAX_AGE = 150


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(value: str | None) -> bool:
    """Return True for ``local@domain`` where the domain contains a dot."""
    if not value:
        return False
    match = EMAIL_PATTERN.fullmatch(value)
    return bool(match) and "." in match.group(1)


def validate_user_data(name: str | None, email: str | None, age: int | None) -> None:
    """Check the mutable fields; the first failing rule wins."""
    if _blank(name):
        raise ValidationError("Name cannot be empty")
    if _blank(email):
        raise ValidationError("Email cannot be empty")
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
    if age is not None and not (MIN_AGE <= age <= MAX_AGE):
        raise ValidationError(f"Age must be between {MIN_AGE} and {MAX_AGE}")


def validate_user_id(user_id: Any) -> None:
    if user_id is None or isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
        raise ValidationError("Invalid user ID")
