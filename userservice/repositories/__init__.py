"""
Persistence adapters.

Services depend on the ``UserRepository`` contract; ``SQLUserRepository`` is
the SQLAlchemy implementation, one unit of work per call.
"""

from .sql_repository import SQLUserRepository, UserRepository

__all__ = ["SQLUserRepository", "UserRepository"]
