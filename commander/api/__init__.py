from fastapi import APIRouter

from commander.api.routers import commands


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(commands.router, prefix="/commands", tags=["commands"])
    return router


__all__ = [
    "create_api_router",
]
