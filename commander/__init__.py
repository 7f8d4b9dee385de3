"""Commander: a searchable catalog of operational commands."""

__version__ = "0.1.0"
