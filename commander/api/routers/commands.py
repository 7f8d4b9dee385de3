"""Catalog endpoints: public search plus key-guarded writes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from commander.api.deps import get_app_settings, get_db_session
from commander.core.config import Settings
from commander.core.security import AdminKey
from commander.modules.commands import (
    CommandNotFoundError,
    CommandService,
    CommandValidationError,
)
from commander.schemas import (
    CommandCreate,
    CommandIdResponse,
    CommandResponse,
    CommandUpdate,
)

router = APIRouter()


@router.get("", response_model=List[CommandResponse], summary="List or search commands")
async def list_commands(
    query: Optional[str] = None,
    platform: Optional[str] = None,
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
):
    service = CommandService.with_session(db)
    try:
        commands = await service.search(query=query, platform=platform, limit=settings.list_limit)
    except CommandValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [CommandResponse.from_domain(command) for command in commands]


@router.post(
    "",
    response_model=CommandIdResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a command",
)
async def create_command(
    _admin_key: AdminKey,
    payload: CommandCreate,
    db: AsyncSession = Depends(get_db_session),
):
    service = CommandService.with_session(db)
    try:
        command = await service.create_command(payload.to_input())
    except CommandValidationError as exc:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    await db.commit()
    return CommandIdResponse(id=command.id)


@router.put("/{command_id}", response_model=CommandIdResponse, summary="Update some fields of a command")
async def update_command(
    _admin_key: AdminKey,
    command_id: int,
    payload: CommandUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    service = CommandService.with_session(db)
    try:
        command = await service.update_command(command_id, payload.to_input())
    except CommandValidationError as exc:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except CommandNotFoundError as exc:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Command not found") from exc

    await db.commit()
    return CommandIdResponse(id=command.id)


@router.delete(
    "/{command_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a command",
)
async def delete_command(
    _admin_key: AdminKey,
    command_id: int,
    db: AsyncSession = Depends(get_db_session),
):
    service = CommandService.with_session(db)
    try:
        await service.delete_command(command_id)
    except CommandNotFoundError as exc:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Command not found") from exc

    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
