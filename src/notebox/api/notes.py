"""Notes API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteDeletedResponse,
    NoteListResponse,
    NotesClearedResponse,
    NoteUpdate,
    NoteUpdatedResponse,
)
from ..core.services import NoteService
from ..database import Database, get_database
from ..middleware.auth import AuthenticatedUser, get_current_user

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={401: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)


@router.get("", response_model=NoteListResponse)
async def list_notes(
    note_filter: Optional[str] = Query(
        None, alias="filter", description="'created' for own notes, 'shared' for received copies"
    ),
    current_user: AuthenticatedUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """List the user's notes, newest first."""
    note_service = NoteService(database)
    return await note_service.list_notes(current_user.id, note_filter)


@router.post(
    "",
    response_model=NoteCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_note(
    request: NoteCreate,
    current_user: AuthenticatedUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Create a new note."""
    note_service = NoteService(database)
    return await note_service.create_note(current_user.id, request)


@router.put(
    "/{note_id}",
    response_model=NoteUpdatedResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": MessageResponse}},
)
async def update_note(
    note_id: str,
    request: NoteUpdate,
    current_user: AuthenticatedUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Update a note."""
    note_service = NoteService(database)
    return await note_service.update_note(current_user.id, note_id, request)


@router.delete("", response_model=NotesClearedResponse)
async def delete_all_notes(
    current_user: AuthenticatedUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Delete all of the user's notes."""
    note_service = NoteService(database)
    return await note_service.delete_all_notes(current_user.id)


@router.delete(
    "/{note_id}", response_model=NoteDeletedResponse, responses={404: {"model": MessageResponse}}
)
async def delete_note(
    note_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Delete a note."""
    note_service = NoteService(database)
    return await note_service.delete_note(current_user.id, note_id)
