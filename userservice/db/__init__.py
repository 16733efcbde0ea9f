"""Database helpers (engine/session export)."""

from .session import Base, dispose_engine, get_engine, get_session, session_scope

__all__ = ["Base", "dispose_engine", "get_engine", "get_session", "session_scope"]
