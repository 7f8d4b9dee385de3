"""Command catalog specific exceptions."""


class CommandError(Exception):
    """Base class for command catalog errors."""


class CommandNotFoundError(CommandError):
    """Raised when no command matches the requested id."""


class CommandValidationError(CommandError):
    """Raised when a payload cannot be turned into a valid command."""
