"""Shared admin key guard for mutating endpoints."""
import logging
import secrets
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status

from commander.core.config import Settings

logger = logging.getLogger(__name__)


def is_valid_admin_key(candidate: Optional[str], expected: str) -> bool:
    """Exact match against the configured key. An unset key matches nothing."""
    if not candidate or not expected:
        return False
    return secrets.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def verify_admin_key(request: Request) -> str:
    """Check the guard header named by the settings the app was created with."""
    settings: Settings = request.app.state.settings
    api_key = request.headers.get(settings.admin_key_header)
    if not is_valid_admin_key(api_key, settings.admin_key):
        logger.warning("Rejected write: admin key %s", "missing" if not api_key else "mismatch")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return api_key


AdminKey = Annotated[str, Depends(verify_admin_key)]
