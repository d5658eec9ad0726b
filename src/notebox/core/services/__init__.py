"""
Service layer: business rules between the API routers and the repositories.
"""

from .interfaces import (
    IAuthService,
    IHealthService,
    INoteService,
    ISharingService,
)

from .auth_service import AuthService
from .health_service import HealthService
from .note_service import NoteService
from .sharing_service import SharingService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "ISharingService",
    "IHealthService",

    # Implementations
    "AuthService",
    "NoteService",
    "SharingService",
    "HealthService",
]
