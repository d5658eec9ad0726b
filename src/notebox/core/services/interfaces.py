"""
Service interfaces for the Notebox application.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ...middleware.auth import AuthenticatedUser
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteDeletedResponse,
    NoteListResponse,
    NotesClearedResponse,
    NoteUpdate,
    NoteUpdatedResponse,
)
from ..schemas.sharing import ShareRequest, ShareResponse


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user, seed the welcome note and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Check credentials and issue a token."""
        pass


class INoteService(ABC):
    """Note CRUD scoped to the owner."""

    @abstractmethod
    async def list_notes(self, user_id: str, note_filter: Optional[str] = None) -> NoteListResponse:
        pass

    @abstractmethod
    async def create_note(self, user_id: str, request: NoteCreate) -> NoteCreatedResponse:
        pass

    @abstractmethod
    async def update_note(self, user_id: str, note_id: str, request: NoteUpdate) -> NoteUpdatedResponse:
        pass

    @abstractmethod
    async def delete_note(self, user_id: str, note_id: str) -> NoteDeletedResponse:
        pass

    @abstractmethod
    async def delete_all_notes(self, user_id: str) -> NotesClearedResponse:
        pass


class ISharingService(ABC):
    """Copy sharing between users."""

    @abstractmethod
    async def share_note(self, user: AuthenticatedUser, note_id: str, request: ShareRequest) -> ShareResponse:
        """Copy an owned note into the recipient's collection."""
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        pass
