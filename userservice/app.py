"""HTTP front end for the user service."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from userservice.core.config import get_settings
from userservice.core.logging import configure_logging, get_logger
from userservice.db.session import dispose_engine
from userservice.routers import users as users_router
from userservice.services.user_service import UserService

logger = get_logger(__name__)


def create_app(user_service: Optional[UserService] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json, force=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("User API starting (env=%s)", settings.app_env)
        yield
        dispose_engine()

    app = FastAPI(title="User Service API", lifespan=lifespan)
    app.state.user_service = user_service or UserService()
    app.include_router(users_router.router)
    return app
