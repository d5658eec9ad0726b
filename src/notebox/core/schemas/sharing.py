"""
Note sharing schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CamelModel


class ShareRequest(BaseModel):
    """Share a note with another user by username."""

    username: Optional[str] = Field(default=None, description="Recipient username")

    model_config = ConfigDict(json_schema_extra={"example": {"username": "bob"}})


class ShareResponse(CamelModel):
    """Confirmation naming the recipient and the id of the new copy."""

    message: str
    shared_note_id: str
