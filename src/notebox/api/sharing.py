"""Sharing API endpoints."""

from fastapi import APIRouter, Depends

from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.sharing import ShareRequest, ShareResponse
from ..core.services import SharingService
from ..database import Database, get_database
from ..middleware.auth import AuthenticatedUser, get_current_user

router = APIRouter(
    prefix="/notes",
    tags=["sharing"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": MessageResponse},
        404: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)


@router.post("/{note_id}/share", response_model=ShareResponse)
async def share_note(
    note_id: str,
    request: ShareRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Copy a note into another user's collection."""
    sharing_service = SharingService(database)
    return await sharing_service.share_note(current_user, note_id, request)
