"""Pydantic schemas used across the project.

Public JSON uses camelCase field names (``commandText``, ``updatedAt``);
both spellings are accepted on input.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from commander.modules.commands import (
    Command,
    CommandCreateInput,
    CommandUpdateInput,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CommandCreate(CamelModel):
    # Left loose on purpose: missing or falsy required fields are a 400, not a 422.
    title: Any = None
    command_text: Any = None
    platform: Any = None
    tags: Any = None
    notes: Any = None

    def to_input(self) -> CommandCreateInput:
        return CommandCreateInput(
            title=self.title,
            command_text=self.command_text,
            platform=self.platform,
            tags=self.tags,
            notes=self.notes,
        )


class CommandUpdate(CamelModel):
    title: Any = None
    command_text: Any = None
    platform: Any = None
    tags: Any = None
    notes: Any = None

    def to_input(self) -> CommandUpdateInput:
        """Only keys present in the request body become changes."""
        provided = {name: getattr(self, name) for name in self.model_fields_set}
        return CommandUpdateInput(**provided)


class CommandIdResponse(BaseModel):
    id: str


class CommandResponse(CamelModel):
    id: str
    title: str
    command_text: str
    platform: str
    tags: list[str] = Field(default_factory=list)
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: datetime

    @classmethod
    def from_domain(cls, command: Command) -> "CommandResponse":
        return cls(
            id=command.id,
            title=command.title,
            command_text=command.command_text,
            platform=command.platform,
            tags=command.tags,
            notes=command.notes,
            created_at=command.created_at,
            updated_at=command.updated_at,
        )
