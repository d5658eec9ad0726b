# Note document for user content
from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DocumentModel, utcnow


class Note(DocumentModel):
    """Note owned by exactly one user."""

    title: str
    content: str
    # string form of the owner's ObjectId
    user_id: str = Field(alias="userId")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    shared_by: Optional[str] = Field(default=None, alias="sharedBy")
    is_shared: Optional[bool] = Field(default=None, alias="isShared")

    def __repr__(self) -> str:
        return f"<Note(title='{self.title}', user_id='{self.user_id}')>"

    def copy_for(self, recipient_id: str, shared_by: str) -> "Note":
        """Build an independent shared copy owned by ``recipient_id``."""
        return Note(
            title=self.title,
            content=self.content,
            user_id=recipient_id,
            shared_by=shared_by,
            is_shared=True,
            created_at=utcnow(),
        )
