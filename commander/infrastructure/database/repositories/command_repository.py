"""SQLAlchemy repository implementation for catalog commands."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commander.db.models import Command as CommandModel, utcnow
from commander.modules.commands.exceptions import CommandNotFoundError
from commander.modules.commands.models import Command


def _next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current time, nudged forward when the clock has not moved past ``previous``."""
    now = utcnow()
    if previous is None:
        return now
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class SqlCommandRepository:
    """Command repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def search(
        self,
        *,
        query: Optional[str],
        platform: Optional[str],
        limit: int,
    ) -> Sequence[Command]:
        stmt = select(CommandModel)
        if platform:
            stmt = stmt.where(CommandModel.platform == platform)
        if query:
            stmt = stmt.where(CommandModel.command_text.icontains(query, autoescape=True))
        stmt = stmt.order_by(CommandModel.updated_at.desc(), CommandModel.id.desc()).limit(limit)
        result = await self._session.execute(stmt)
        return [Command.from_orm(model) for model in result.scalars().all()]

    async def add(
        self,
        *,
        title: str,
        command_text: str,
        platform: str,
        tags: list[str],
        notes: Optional[str],
    ) -> Command:
        now = utcnow()
        model = CommandModel(
            title=title,
            command_text=command_text,
            platform=platform,
            tags=tags,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return Command.from_orm(model)

    async def update(self, command_id: int, values: dict[str, Any]) -> Command:
        model = await self._get_model(command_id)
        for name, value in values.items():
            setattr(model, name, value)
        model.updated_at = _next_timestamp(model.updated_at)

        await self._session.flush()
        await self._session.refresh(model)
        return Command.from_orm(model)

    async def delete(self, command_id: int) -> None:
        model = await self._get_model(command_id)
        await self._session.delete(model)
        await self._session.flush()

    async def _get_model(self, command_id: int) -> CommandModel:
        stmt = select(CommandModel).where(CommandModel.id == command_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise CommandNotFoundError(command_id)
        return model
