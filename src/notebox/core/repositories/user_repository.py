"""User repository for database operations."""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from ..models.user import User


class UserRepository:
    """Repository for the users collection.

    Uniqueness of username and email is enforced by the collection's unique
    indexes; ``create_user`` lets ``pymongo.errors.DuplicateKeyError``
    propagate to the caller.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create_user(self, user: User) -> User:
        """Insert new user and return it with its assigned id."""
        result = await self.collection.insert_one(user.to_document())
        return user.model_copy(update={"id": result.inserted_id})

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        document = await self.collection.find_one({"username": username})
        return User.from_document(document) if document else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        document = await self.collection.find_one({"email": email})
        return User.from_document(document) if document else None
