"""
Document models for the Notebox application.

These pydantic models describe the stored shape of the documents kept in
the MongoDB collections:
    - User: account with username, email and password hash ("users")
    - Note: note content owned by one user, possibly a shared copy ("notes")
"""

from .base import DocumentModel, parse_object_id
from .note import Note
from .user import User

__all__ = [
    "DocumentModel",
    "parse_object_id",
    "User",
    "Note",
]
