"""
User management use cases: create, read, list, update and delete with
validation and email uniqueness.
"""

from __future__ import annotations

from typing import Optional

from userservice.core.logging import get_logger
from userservice.db.models import User
from userservice.domain.errors import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from userservice.domain.users import validate_user_data, validate_user_id
from userservice.repositories.sql_repository import SQLUserRepository, UserRepository

logger = get_logger(__name__)


class UserService:
    """Validates input, enforces email uniqueness and delegates to the repository."""

    def __init__(self, repository: Optional[UserRepository] = None) -> None:
        self.repository = repository or SQLUserRepository()

    def create_user(self, name: str, email: str, age: Optional[int] = None) -> User:
        logger.info("Creating new user: %s", email)
        validate_user_data(name, email, age)
        if self.repository.exists_by_email(email):
            logger.warning("Email already exists: %s", email)
            raise EmailAlreadyExistsError(email)
        return self.repository.create(User(name=name, email=email, age=age))

    def get_user_by_id(self, user_id: int) -> User:
        logger.info("Getting user by id: %s", user_id)
        validate_user_id(user_id)
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def get_all_users(self) -> list[User]:
        logger.info("Getting all users")
        return self.repository.find_all()

    def update_user(self, user_id: int, name: str, email: str, age: Optional[int] = None) -> User:
        logger.info("Updating user with id: %s", user_id)
        validate_user_data(name, email, age)
        existing = self.get_user_by_id(user_id)
        if existing.email != email and self.repository.exists_by_email(email):
            logger.warning("Email already exists during update: %s", email)
            raise EmailAlreadyExistsError(email)
        existing.name = name
        existing.email = email
        existing.age = age
        return self.repository.update(existing)

    def delete_user(self, user_id: int) -> None:
        logger.info("Deleting user with id: %s", user_id)
        validate_user_id(user_id)
        self.get_user_by_id(user_id)
        self.repository.delete(user_id)

    def get_user_by_email(self, email: str) -> User:
        logger.info("Getting user by email: %s", email)
        if email is None or not email.strip():
            raise ValidationError("Email cannot be empty")
        user = self.repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(f"User not found with email: {email}")
        return user
