"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from userservice.core.logging import get_logger
from userservice.db.models import User
from userservice.db.session import SessionFactory, get_session, session_scope
from userservice.domain.errors import (
    EmailAlreadyExistsError,
    StorageError,
    UserNotFoundError,
    UserServiceError,
)

logger = get_logger(__name__)


class UserRepository(Protocol):
    """Persistence contract consumed by UserService."""

    def create(self, user: User) -> User: ...

    def find_by_id(self, user_id: int) -> Optional[User]: ...

    def find_all(self) -> list[User]: ...

    def update(self, user: User) -> User: ...

    def delete(self, user_id: int) -> None: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def exists_by_email(self, email: str) -> bool: ...


def _is_email_conflict(exc: IntegrityError) -> bool:
    text = str(getattr(exc, "orig", exc)).lower()
    return "email" in text and ("unique" in text or "duplicate" in text)


class SQLUserRepository:
    """CRUD helpers wrapping one SQLAlchemy session per call."""

    def __init__(self, session_factory: Optional[SessionFactory] = None) -> None:
        self.session_factory = session_factory or get_session

    def create(self, user: User) -> User:
        logger.debug("Saving user: %s", user.email)
        if user.created_at is None:
            user.created_at = datetime.now(timezone.utc)
        try:
            with session_scope(self.session_factory) as session:
                session.add(user)
                session.flush()
                session.refresh(user)
        except IntegrityError as exc:
            if _is_email_conflict(exc):
                logger.warning("Email rejected by unique constraint: %s", user.email)
                raise EmailAlreadyExistsError(user.email) from exc
            logger.exception("Error saving user: %s", user.email)
            raise StorageError(f"Error saving user: {user.email}") from exc
        except UserServiceError:
            raise
        except Exception as exc:
            logger.exception("Error saving user: %s", user.email)
            raise StorageError(f"Error saving user: {user.email}") from exc
        logger.info("User saved successfully with id: %s", user.id)
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        logger.debug("Finding user by id: %s", user_id)
        try:
            with session_scope(self.session_factory) as session:
                return session.get(User, user_id)
        except UserServiceError:
            raise
        except Exception as exc:
            logger.exception("Error finding user by id: %s", user_id)
            raise StorageError(f"Error finding user by id: {user_id}") from exc

    def find_all(self) -> list[User]:
        logger.debug("Finding all users")
        try:
            with session_scope(self.session_factory) as session:
                users = list(session.execute(select(User)).scalars().all())
        except UserServiceError:
            raise
        except Exception as exc:
            logger.exception("Error finding all users")
            raise StorageError("Error finding all users") from exc
        logger.debug("Users found: %d", len(users))
        return users

    def update(self, user: User) -> User:
        logger.debug("Updating user: %s", user.id)
        try:
            with session_scope(self.session_factory) as session:
                row = session.get(User, user.id) if user.id is not None else None
                if row is None:
                    logger.error("Cannot update missing user: %s", user.id)
                    raise StorageError(f"Error updating user: {user.id} does not exist")
                row.name = user.name
                row.email = user.email
                row.age = user.age
                session.flush()
                session.refresh(row)
        except IntegrityError as exc:
            if _is_email_conflict(exc):
                logger.warning("Email rejected by unique constraint: %s", user.email)
                raise EmailAlreadyExistsError(user.email) from exc
            logger.exception("Error updating user: %s", user.id)
            raise StorageError(f"Error updating user: {user.id}") from exc
        except UserServiceError:
            raise
        except Exception as exc:
            logger.exception("Error updating user: %s", user.id)
            raise StorageError(f"Error updating user: {user.id}") from exc
        logger.info("User updated successfully with id: %s", row.id)
        return row

    def delete(self, user_id: int) -> None:
        logger.debug("Deleting user: %s", user_id)
        try:
            with session_scope(self.session_factory) as session:
                row = session.get(User, user_id)
                if row is None:
                    raise UserNotFoundError(user_id)
                session.delete(row)
        except UserNotFoundError:
            logger.warning("User not found: %s", user_id)
            raise
        except UserServiceError:
            raise
        except Exception as exc:
            logger.exception("Error deleting user: %s", user_id)
            raise StorageError(f"Error deleting user: {user_id}") from exc
        logger.info("User deleted successfully with id: %s", user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        logger.debug("Finding user by email: %s", email)
        try:
            with session_scope(self.session_factory) as session:
                stmt = select(User).where(User.email == email)
                return session.execute(stmt).scalar_one_or_none()
        except UserServiceError:
            raise
        except Exception as exc:
            logger.exception("Error finding user by email: %s", email)
            raise StorageError(f"Error finding user by email: {email}") from exc

    def exists_by_email(self, email: str) -> bool:
        logger.debug("Checking if email exists: %s", email)
        try:
            with session_scope(self.session_factory) as session:
                stmt = select(User.id).where(User.email == email).limit(1)
                return session.execute(stmt).first() is not None
        except UserServiceError:
            raise
        except Exception as exc:
            logger.exception("Error checking if email exists: %s", email)
            raise StorageError(f"Error checking if email exists: {email}") from exc
