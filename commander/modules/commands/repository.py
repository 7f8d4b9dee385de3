"""Repository protocol for command persistence."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .models import Command


class CommandRepository(Protocol):
    async def search(
        self,
        *,
        query: Optional[str],
        platform: Optional[str],
        limit: int,
    ) -> Sequence[Command]:
        ...

    async def add(
        self,
        *,
        title: str,
        command_text: str,
        platform: str,
        tags: list[str],
        notes: Optional[str],
    ) -> Command:
        ...

    async def update(self, command_id: int, values: dict[str, Any]) -> Command:
        ...

    async def delete(self, command_id: int) -> None:
        ...
