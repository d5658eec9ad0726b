"""
User document for authentication.
"""

from pydantic import Field

from .base import DocumentModel


class User(DocumentModel):
    """User account with email/password auth."""

    username: str
    email: str
    # bcrypt hash, never the plain password
    password: str = Field(repr=False)

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
