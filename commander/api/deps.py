"""Reusable FastAPI dependencies."""

from fastapi import Request

from commander.core.config import Settings
from commander.infrastructure.database.session import get_session as get_db_session


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


__all__ = [
    "get_app_settings",
    "get_db_session",
]
