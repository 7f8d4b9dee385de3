"""Domain models for catalog commands."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from commander.db import models as orm

from .exceptions import CommandValidationError


class Platform(str, Enum):
    WINDOWS = "windows"
    POWERSHELL = "powershell"
    LINUX = "linux"
    MAC = "mac"
    NETWORK = "network"

    @classmethod
    def parse(cls, value: Any) -> "Platform":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError as exc:
            raise CommandValidationError(f"Unknown platform: {value}") from exc


def normalize_tags(value: Any) -> list[str]:
    """Trim and lowercase every tag, dropping empties. Anything but a list yields []."""
    if not isinstance(value, list):
        return []
    tags = (str(tag).strip().lower() for tag in value if tag is not None)
    return [tag for tag in tags if tag]


def normalize_notes(value: Any) -> Optional[str]:
    return str(value) if value else None


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands timestamps back without tzinfo; they are stored as UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(slots=True)
class Command:
    id: str
    title: str
    command_text: str
    platform: str
    tags: list[str]
    notes: Optional[str]
    created_at: Optional[datetime]
    updated_at: datetime

    @classmethod
    def from_orm(cls, instance: orm.Command) -> "Command":
        return cls(
            id=str(instance.id),
            title=instance.title,
            command_text=instance.command_text,
            platform=instance.platform,
            tags=list(instance.tags or []),
            notes=instance.notes,
            created_at=_as_utc(instance.created_at),
            updated_at=_as_utc(instance.updated_at),
        )


@dataclass(slots=True)
class CommandCreateInput:
    title: Any = None
    command_text: Any = None
    platform: Any = None
    tags: Any = None
    notes: Any = None


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class CommandUpdateInput:
    title: Any = UNSET
    command_text: Any = UNSET
    platform: Any = UNSET
    tags: Any = UNSET
    notes: Any = UNSET

    def provided(self) -> dict[str, Any]:
        """Return only the fields the caller actually supplied."""
        values = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is not UNSET:
                values[item.name] = value
        return values
