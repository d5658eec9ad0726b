"""Middleware for authentication and other cross-cutting concerns."""

from .auth import AuthenticatedUser, JWTBearer, get_current_user

__all__ = ["AuthenticatedUser", "get_current_user", "JWTBearer"]
