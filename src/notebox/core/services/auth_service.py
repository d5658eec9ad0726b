"""Authentication service implementation."""

from typing import Optional

from fastapi import HTTPException, status
from pymongo.errors import DuplicateKeyError
from starlette.concurrency import run_in_threadpool

from ...config import Settings, get_settings
from ...database import Database
from ...security import create_access_token, hash_password, verify_dummy_password, verify_password
from ..errors import handle_unexpected_errors
from ..logging import get_logger
from ..models.note import Note
from ..models.user import User
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")

MIN_PASSWORD_LENGTH = 6

# Every new account starts with this note, attributed to the maintainer
WELCOME_NOTE_SHARED_BY = "nickgeorgouses"
WELCOME_NOTE_TITLE = "Shared with you"
WELCOME_NOTE_CONTENT = (
    f"This note was shared with you automatically by the owner ({WELCOME_NOTE_SHARED_BY}), "
    "try sharing a note with them too!"
)

INVALID_CREDENTIALS = "Invalid email or password"


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id_str, username=user.username, email=user.email)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, database: Database, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.user_repo = UserRepository(database.users)
        self.note_repo = NoteRepository(database.notes)

    @handle_unexpected_errors("Server error", "Register error")
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user."""
        if not request.username or not request.email or not request.password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Please provide username, email, and password",
            )

        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            )

        hashed_password = await run_in_threadpool(hash_password, request.password, self.settings)

        # The unique indexes on username and email decide conflicts
        try:
            user = await self.user_repo.create_user(
                User(username=request.username, email=request.email, password=hashed_password)
            )
        except DuplicateKeyError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User with this email or username already exists",
            )

        await self.note_repo.create_note(
            Note(
                title=WELCOME_NOTE_TITLE,
                content=WELCOME_NOTE_CONTENT,
                user_id=user.id_str,
                shared_by=WELCOME_NOTE_SHARED_BY,
                is_shared=True,
            )
        )
        logger.info("Welcome note created for new user", extra={"user_id": user.id_str})

        return AuthResponse(
            message="User registered successfully",
            token=create_access_token(user.id_str, user.username, settings=self.settings),
            user=_user_response(user),
        )

    @handle_unexpected_errors("Server error", "Login error")
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return an identity token."""
        if not request.email or not request.password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Please provide email and password",
            )

        user = await self.user_repo.get_by_email(request.email)
        if not user:
            # Same bcrypt cost as a real check so timing does not reveal the account
            await run_in_threadpool(verify_dummy_password, request.password, self.settings)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)

        if not await run_in_threadpool(verify_password, request.password, user.password):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)

        return AuthResponse(
            message="Login successful!",
            token=create_access_token(user.id_str, user.username, settings=self.settings),
            user=_user_response(user),
        )
