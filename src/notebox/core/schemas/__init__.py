"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .common import ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteDeletedResponse,
    NoteListResponse,
    NoteResponse,
    NotesClearedResponse,
    NoteUpdate,
    NoteUpdatedResponse,
)
from .sharing import ShareRequest, ShareResponse

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    "AuthResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListResponse",
    "NoteCreatedResponse",
    "NoteUpdatedResponse",
    "NoteDeletedResponse",
    "NotesClearedResponse",
    # Sharing schemas
    "ShareRequest",
    "ShareResponse",
    # Common schemas
    "MessageResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
