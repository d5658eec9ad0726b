"""
Base document model with common fields.
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentModel(BaseModel):
    """Base for documents stored in a MongoDB collection.

    Field aliases are the stored key names, so ``to_document`` output can be
    inserted as-is and raw documents can be validated straight back.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(default=None, alias="_id")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        """Dump to the stored layout, leaving out unset optionals and ``_id``."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def id_str(self) -> Optional[str]:
        return str(self.id) if self.id is not None else None


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return the ObjectId for ``value`` or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None
