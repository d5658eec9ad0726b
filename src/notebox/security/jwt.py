"""Identity token utilities."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from ..config import Settings, get_settings

TOKEN_TYPE = "access"


class TokenError(Exception):
    """Raised when an identity token cannot be trusted."""


@dataclass(frozen=True)
class TokenPayload:
    user_id: str
    username: str


def create_access_token(
    user_id: str,
    username: str,
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Create a signed identity token for the given user."""
    settings = settings or get_settings()

    if expires_delta is None:
        expires_delta = timedelta(days=settings.access_token_expire_days)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode = {
        "sub": str(user_id),
        "username": username,
        "type": TOKEN_TYPE,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> TokenPayload:
    """Verify signature and expiry and return the embedded identity."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise TokenError(str(e)) from e

    if payload.get("type") != TOKEN_TYPE:
        raise TokenError("Wrong token type")

    user_id = payload.get("sub")
    username = payload.get("username")
    if not user_id or not username:
        raise TokenError("Token is missing identity claims")

    return TokenPayload(user_id=user_id, username=username)
