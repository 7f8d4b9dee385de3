"""Domain service for the command catalog."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import CommandValidationError
from .models import (
    Command,
    CommandCreateInput,
    CommandUpdateInput,
    Platform,
    normalize_notes,
    normalize_tags,
)
from .repository import CommandRepository

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
REQUIRED_FIELDS = ("title", "command_text", "platform")
# matches the width of commands.title
TITLE_MAX_LENGTH = 200


def _clean_filter(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _checked_title(value: Any) -> str:
    title = str(value)
    if len(title) > TITLE_MAX_LENGTH:
        raise CommandValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return title


class CommandService:
    """Encapsulates the catalog use cases: search, create, update, delete."""

    def __init__(self, repository: CommandRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CommandService":
        # lazy import to avoid a cycle with the repository package
        from commander.infrastructure.database.repositories import SqlCommandRepository

        return cls(SqlCommandRepository(session))

    async def search(
        self,
        *,
        query: Optional[str] = None,
        platform: Optional[str] = None,
        limit: int = 200,
    ) -> Sequence[Command]:
        query = _clean_filter(query)
        platform = _clean_filter(platform)
        if platform is not None:
            platform = Platform.parse(platform).value
        return await self._repository.search(query=query, platform=platform, limit=limit)

    async def create_command(self, payload: CommandCreateInput) -> Command:
        if not payload.title or not payload.command_text or not payload.platform:
            raise CommandValidationError(MISSING_FIELDS)

        command = await self._repository.add(
            title=_checked_title(payload.title),
            command_text=str(payload.command_text),
            platform=Platform.parse(payload.platform).value,
            tags=normalize_tags(payload.tags),
            notes=normalize_notes(payload.notes),
        )
        logger.info("Created command %s (%s)", command.id, command.platform)
        return command

    async def update_command(self, command_id: int, payload: CommandUpdateInput) -> Command:
        values = self._normalize_changes(payload.provided())
        command = await self._repository.update(command_id, values)
        logger.info("Updated command %s fields=%s", command.id, sorted(values))
        return command

    async def delete_command(self, command_id: int) -> None:
        await self._repository.delete(command_id)
        logger.info("Deleted command %s", command_id)

    @staticmethod
    def _normalize_changes(changes: dict[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for name, value in changes.items():
            if name in REQUIRED_FIELDS and not value:
                raise CommandValidationError(MISSING_FIELDS)
            if name == "platform":
                values[name] = Platform.parse(value).value
            elif name == "title":
                values[name] = _checked_title(value)
            elif name == "tags":
                values[name] = normalize_tags(value)
            elif name == "notes":
                values[name] = normalize_notes(value)
            else:
                values[name] = str(value)
        return values
