"""Authentication middleware."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import get_app_settings
from ..core.logging import get_logger
from ..security import TokenError, decode_access_token

logger = get_logger("middleware.auth")


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity attached to a request once its token has been verified."""

    id: str
    username: str


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication."""

    def __init__(self):
        # Missing credentials are reported as 401 below rather than 403
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> AuthenticatedUser:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or credentials.scheme.lower() != "bearer":
            raise _unauthorized("Access denied. No token provided.")

        try:
            payload = decode_access_token(credentials.credentials, get_app_settings(request))
        except TokenError as e:
            logger.info("Rejected identity token", extra={"reason": str(e)})
            raise _unauthorized("Invalid or expired token")

        return AuthenticatedUser(id=payload.user_id, username=payload.username)


# Dependency for getting the current user from the bearer token
async def get_current_user(user: AuthenticatedUser = Depends(JWTBearer())) -> AuthenticatedUser:
    """Get current authenticated user."""
    return user
