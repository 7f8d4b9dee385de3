"""Logging setup for the web process.

Modules log through ``logging.getLogger(__name__)``; this module only decides
where the records go and how they look.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from commander.core.config import Settings

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(settings: Settings) -> None:
    """Install one stream handler on the root logger.

    Calling it again replaces the handler instead of stacking another one.
    """
    handler = logging.StreamHandler()
    if settings.logging.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_commander", False):
            root.removeHandler(existing)
    handler._commander = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    level = "DEBUG" if settings.debug else settings.logging.level.upper()
    root.setLevel(level)
