"""Note service implementation."""

from typing import Optional

from fastapi import HTTPException, status

from ...database import Database
from ..errors import handle_unexpected_errors
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteDeletedResponse,
    NoteListResponse,
    NoteResponse,
    NotesClearedResponse,
    NoteUpdate,
    NoteUpdatedResponse,
)
from .interfaces import INoteService

logger = get_logger("services.notes")


def _require_title_and_content(request: NoteCreate) -> None:
    if not request.title or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Title and content are required"
        )


def _note_not_found() -> HTTPException:
    # Same answer whether the note is missing or owned by someone else
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, database: Database):
        self.note_repo = NoteRepository(database.notes)

    @handle_unexpected_errors("Server error", "Error getting notes")
    async def list_notes(self, user_id: str, note_filter: Optional[str] = None) -> NoteListResponse:
        """List the user's notes, newest first.

        ``note_filter`` is ``"created"`` for the user's own notes, ``"shared"``
        for copies shared with them; anything else returns both.
        """
        logger.debug("Fetching notes", extra={"user_id": user_id, "filter": note_filter})
        notes = await self.note_repo.list_user_notes(user_id, note_filter)
        return NoteListResponse(
            message="Notes retrieved successfully!",
            notes=[NoteResponse.from_note(note) for note in notes],
        )

    @handle_unexpected_errors("Server error", "Error creating note")
    async def create_note(self, user_id: str, request: NoteCreate) -> NoteCreatedResponse:
        """Create new note."""
        _require_title_and_content(request)

        note = await self.note_repo.create_note(
            Note(title=request.title, content=request.content, user_id=user_id)
        )
        return NoteCreatedResponse(message="Note created successfully!", note_id=note.id_str)

    @handle_unexpected_errors("Error updating note")
    async def update_note(self, user_id: str, note_id: str, request: NoteUpdate) -> NoteUpdatedResponse:
        """Replace title and content of an owned note."""
        _require_title_and_content(request)

        if not await self.note_repo.update_note(note_id, user_id, request.title, request.content):
            raise _note_not_found()

        return NoteUpdatedResponse(message="Note updated successfully!", note_id=note_id)

    @handle_unexpected_errors("Error deleting note")
    async def delete_note(self, user_id: str, note_id: str) -> NoteDeletedResponse:
        """Delete an owned note."""
        if not await self.note_repo.delete_note(note_id, user_id):
            raise _note_not_found()

        return NoteDeletedResponse(message="Note deleted successfully!", deleted_id=note_id)

    @handle_unexpected_errors("Error clearing notes")
    async def delete_all_notes(self, user_id: str) -> NotesClearedResponse:
        """Delete every note the user owns."""
        deleted_count = await self.note_repo.delete_user_notes(user_id)
        logger.info("Cleared notes", extra={"user_id": user_id, "deleted_count": deleted_count})
        return NotesClearedResponse(
            message=f"Cleared {deleted_count} notes!", deleted_count=deleted_count
        )
