"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from ..config import Settings, get_app_settings
from ..core.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.services import AuthService
from ..database import Database, get_database

router = APIRouter(
    prefix="/auth",
    tags=["authentication"],
    responses={400: {"model": ErrorResponse}, 500: {"model": MessageResponse}},
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
):
    """Register a new user and return an identity token."""
    auth_service = AuthService(database, settings)
    return await auth_service.register_user(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
):
    """Login user and get an identity token."""
    auth_service = AuthService(database, settings)
    return await auth_service.authenticate_user(request)
