"""SQLAlchemy-backed repository implementations."""

from .command_repository import SqlCommandRepository

__all__ = [
    "SqlCommandRepository",
]
