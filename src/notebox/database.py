# MongoDB connection setup
from typing import Callable, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from .config import Settings, get_settings
from .core.logging import get_logger

logger = get_logger("database")

USERS_COLLECTION = "users"
NOTES_COLLECTION = "notes"


class DatabaseNotInitializedError(RuntimeError):
    """Raised when the database handle is used before connect() succeeded."""


class Database:
    """Explicitly constructed handle to the document store."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Callable[..., AsyncIOMotorClient] = AsyncIOMotorClient,
    ):
        self.settings = settings or get_settings()
        self._client_factory = client_factory
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> None:
        """Connect, select the database and declare indexes."""
        # datetimes are read back as UTC-aware
        client = self._client_factory(self.settings.mongodb_uri, tz_aware=True)
        try:
            db = client[self.settings.database_name]
            await self._ensure_indexes(db)
        except Exception as e:
            logger.error("Database connection failed", exc_info=e)
            client.close()
            raise

        self._client = client
        self._db = db
        logger.info(
            "Connected to MongoDB", extra={"database": self.settings.database_name}
        )

    @staticmethod
    async def _ensure_indexes(db: AsyncIOMotorDatabase) -> None:
        users = db[USERS_COLLECTION]
        await users.create_index([("username", ASCENDING)], unique=True, name="username_unique")
        await users.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        await db[NOTES_COLLECTION].create_index(
            [("userId", ASCENDING), ("createdAt", DESCENDING)], name="owner_created"
        )

    def get(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise DatabaseNotInitializedError("Database not connected, call connect() first")
        return self._db

    @property
    def users(self) -> AsyncIOMotorCollection:
        return self.get()[USERS_COLLECTION]

    @property
    def notes(self) -> AsyncIOMotorCollection:
        return self.get()[NOTES_COLLECTION]

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None


def get_database(request: Request) -> Database:
    """Get the database attached to the running application."""
    return request.app.state.database
