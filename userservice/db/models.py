"""SQLAlchemy model for the user record."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    age = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __init__(self, name: str | None = None, email: str | None = None, age: int | None = None, **kw):
        super().__init__(name=name, email=email, age=age, **kw)

    # Same domain object only once both sides carry the same persisted id.
    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, User):
            return NotImplemented
        return self.id is not None and self.id == other.id

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return (
            f"User(id={self.id!r}, name={self.name!r}, email={self.email!r}, "
            f"age={self.age!r}, created_at={self.created_at!r})"
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
