"""Sharing service implementation."""

from fastapi import HTTPException, status

from ...database import Database
from ...middleware.auth import AuthenticatedUser
from ..errors import handle_unexpected_errors
from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.sharing import ShareRequest, ShareResponse
from .interfaces import ISharingService

logger = get_logger("services.sharing")


class SharingService(ISharingService):
    """Shares notes by copying them into the recipient's collection.

    The original is never touched; the copy is an independent note owned by
    the recipient, flagged ``isShared`` and attributed to the sharer.
    """

    def __init__(self, database: Database):
        self.note_repo = NoteRepository(database.notes)
        self.user_repo = UserRepository(database.users)

    @handle_unexpected_errors("Error sharing note")
    async def share_note(
        self, user: AuthenticatedUser, note_id: str, request: ShareRequest
    ) -> ShareResponse:
        """Share an owned note with another user."""
        if not request.username:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Username is required"
            )

        if request.username == user.username:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot share note with yourself"
            )

        recipient = await self.user_repo.get_by_username(request.username)
        if not recipient:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        original = await self.note_repo.get_by_id_and_user(note_id, user.id)
        if not original:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Note not found or you do not own this note",
            )

        shared = await self.note_repo.create_note(
            original.copy_for(recipient.id_str, shared_by=user.username)
        )
        logger.info(
            "Created shared note copy",
            extra={
                "note_id": note_id,
                "shared_note_id": shared.id_str,
                "recipient": recipient.username,
            },
        )

        return ShareResponse(
            message=f"Note shared successfully with {recipient.username}!",
            shared_note_id=shared.id_str,
        )
