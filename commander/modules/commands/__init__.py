"""Command catalog services and models."""

from .exceptions import CommandError, CommandNotFoundError, CommandValidationError
from .models import (
    Command,
    CommandCreateInput,
    CommandUpdateInput,
    Platform,
    UNSET,
    normalize_notes,
    normalize_tags,
)
from .service import CommandService

__all__ = [
    "Command",
    "CommandCreateInput",
    "CommandUpdateInput",
    "CommandService",
    "CommandError",
    "CommandNotFoundError",
    "CommandValidationError",
    "Platform",
    "UNSET",
    "normalize_notes",
    "normalize_tags",
]
