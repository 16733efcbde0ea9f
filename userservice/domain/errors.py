"""Error taxonomy shared by the repository and the service layer."""
from __future__ import annotations

from typing import Optional, Union


class UserServiceError(Exception):
    """Base class for every failure surfaced by the user service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(UserServiceError):
    """Malformed input, detected before any storage access."""


class EmailAlreadyExistsError(UserServiceError):
    def __init__(self, email: Optional[str]):
        super().__init__(f"Email already exists: {email}")
        self.email = email


class UserNotFoundError(UserServiceError):
    """Raised with either a numeric id or a ready-made message."""

    def __init__(self, id_or_message: Union[int, str, None]):
        if isinstance(id_or_message, str):
            message = id_or_message
        else:
            message = f"User not found with id: {id_or_message}"
        super().__init__(message)


NotFoundError = UserNotFoundError


class StorageError(UserServiceError):
    """Underlying store failure; the unit of work has already been rolled back."""
