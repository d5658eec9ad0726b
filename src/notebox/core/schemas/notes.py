"""
Note management schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.note import Note
from .common import CamelModel


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")


class NoteUpdate(NoteCreate):
    """Note update request schema. Both fields are replaced."""


class NoteResponse(CamelModel):
    """A stored note as returned to its owner."""

    id: str
    title: str
    content: str
    user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    shared_by: Optional[str] = None
    is_shared: Optional[bool] = None

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id_str,
            title=note.title,
            content=note.content,
            user_id=note.user_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
            shared_by=note.shared_by,
            is_shared=note.is_shared,
        )


class NoteListResponse(BaseModel):
    message: str
    notes: List[NoteResponse]


class NoteCreatedResponse(CamelModel):
    message: str
    note_id: str


class NoteUpdatedResponse(CamelModel):
    message: str
    note_id: str


class NoteDeletedResponse(CamelModel):
    message: str
    deleted_id: str


class NotesClearedResponse(CamelModel):
    message: str
    deleted_count: int
