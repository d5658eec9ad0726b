"""Security utilities."""

from .jwt import TokenError, TokenPayload, create_access_token, decode_access_token
from .password import get_password_context, hash_password, verify_dummy_password, verify_password

__all__ = [
    "get_password_context",
    "hash_password",
    "verify_password",
    "verify_dummy_password",
    "create_access_token",
    "decode_access_token",
    "TokenError",
    "TokenPayload",
]
