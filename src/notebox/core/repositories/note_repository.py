"""Note repository for database operations."""

from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

from ..models.base import parse_object_id, utcnow
from ..models.note import Note

FILTER_CREATED = "created"
FILTER_SHARED = "shared"


class NoteRepository:
    """Repository for the notes collection.

    Every lookup that takes a note id is also scoped to the owner, so a note
    that exists but belongs to someone else behaves exactly like a missing one.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def build_list_query(user_id: str, note_filter: Optional[str] = None) -> Dict[str, Any]:
        """Query for a user's notes, optionally only own or only shared ones."""
        query: Dict[str, Any] = {"userId": user_id}
        if note_filter == FILTER_CREATED:
            query["isShared"] = {"$ne": True}
        elif note_filter == FILTER_SHARED:
            query["isShared"] = True
        return query

    async def create_note(self, note: Note) -> Note:
        """Insert new note and return it with its assigned id."""
        result = await self.collection.insert_one(note.to_document())
        return note.model_copy(update={"id": result.inserted_id})

    async def get_by_id_and_user(self, note_id: str, user_id: str) -> Optional[Note]:
        """Get note by ID if owned by user."""
        object_id = parse_object_id(note_id)
        if object_id is None:
            return None
        document = await self.collection.find_one({"_id": object_id, "userId": user_id})
        return Note.from_document(document) if document else None

    async def list_user_notes(self, user_id: str, note_filter: Optional[str] = None) -> List[Note]:
        """List user notes, newest first."""
        cursor = self.collection.find(
            self.build_list_query(user_id, note_filter), sort=[("createdAt", DESCENDING)]
        )
        documents = await cursor.to_list(length=None)
        return [Note.from_document(document) for document in documents]

    async def update_note(self, note_id: str, user_id: str, title: str, content: str) -> bool:
        """Update title and content if owned by user. Returns whether a note matched."""
        object_id = parse_object_id(note_id)
        if object_id is None:
            return False
        result = await self.collection.update_one(
            {"_id": object_id, "userId": user_id},
            {"$set": {"title": title, "content": content, "updatedAt": utcnow()}},
        )
        return result.matched_count > 0

    async def delete_note(self, note_id: str, user_id: str) -> bool:
        """Delete note if owned by user."""
        object_id = parse_object_id(note_id)
        if object_id is None:
            return False
        result = await self.collection.delete_one({"_id": object_id, "userId": user_id})
        return result.deleted_count > 0

    async def delete_user_notes(self, user_id: str) -> int:
        """Delete every note owned by user. Returns the number removed."""
        result = await self.collection.delete_many({"userId": user_id})
        return result.deleted_count
