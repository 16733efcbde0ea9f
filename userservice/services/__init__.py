"""
High-level use cases for the user service.

Presentation layers (console menu, HTTP router) call these services instead of
touching repositories or sessions directly.
"""

from .user_service import UserService

__all__ = ["UserService"]
