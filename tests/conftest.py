from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import pytest

# Make the userservice package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userservice.core import config as core_config  # noqa: E402
from userservice.db import create_tables  # noqa: E402
from userservice.db import session as db_session  # noqa: E402
from userservice.db.models import User  # noqa: E402
from userservice.domain.errors import StorageError, UserNotFoundError  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database with settings/engine caches reset around the test."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    create_tables.drop_all()
    create_tables.create_all()

    yield db_file

    create_tables.drop_all()
    db_session.dispose_engine()
    core_config.get_settings.cache_clear()


class FakeUserRepository:
    """In-memory UserRepository that records every call by name."""

    def __init__(self) -> None:
        self.rows: dict[int, User] = {}
        self.calls: list[str] = []
        self._next_id = 1

    def _copy(self, user: User) -> User:
        clone = User(name=user.name, email=user.email, age=user.age)
        clone.id = user.id
        clone.created_at = user.created_at
        return clone

    def create(self, user: User) -> User:
        self.calls.append("create")
        user.id = self._next_id
        user.created_at = datetime.now(timezone.utc)
        self._next_id += 1
        self.rows[user.id] = self._copy(user)
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        self.calls.append("find_by_id")
        row = self.rows.get(user_id)
        return self._copy(row) if row else None

    def find_all(self) -> list[User]:
        self.calls.append("find_all")
        return [self._copy(row) for row in self.rows.values()]

    def update(self, user: User) -> User:
        self.calls.append("update")
        if user.id not in self.rows:
            raise StorageError(f"Error updating user: {user.id} does not exist")
        row = self.rows[user.id]
        row.name, row.email, row.age = user.name, user.email, user.age
        return self._copy(row)

    def delete(self, user_id: int) -> None:
        self.calls.append("delete")
        if user_id not in self.rows:
            raise UserNotFoundError(user_id)
        del self.rows[user_id]

    def find_by_email(self, email: str) -> Optional[User]:
        self.calls.append("find_by_email")
        for row in self.rows.values():
            if row.email == email:
                return self._copy(row)
        return None

    def exists_by_email(self, email: str) -> bool:
        self.calls.append("exists_by_email")
        return any(row.email == email for row in self.rows.values())


@pytest.fixture()
def fake_repo() -> FakeUserRepository:
    return FakeUserRepository()
