"""Shared pytest fixtures backed by an in-memory MongoDB (mongomock-motor)."""

import os

# Settings are read when notebox is first imported
os.environ["JWT_SECRET"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_TO_FILE"] = "false"

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from notebox.config import Settings
from notebox.database import Database
from notebox.main import create_app


class MockMongoClient(AsyncMongoMockClient):
    """In-memory client accepting the same constructor call as AsyncIOMotorClient."""

    def close(self):
        pass


@pytest.fixture
def public_dir(tmp_path):
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "hello.txt").write_text("static hello")
    return directory


@pytest.fixture
def test_settings(public_dir):
    """Settings for tests: fast hashing, no log files, temp static dir."""
    return Settings(
        jwt_secret="test-secret-key",
        bcrypt_rounds=4,
        log_to_file=False,
        database_name="noteapp_test",
        public_dir=str(public_dir),
    )


@pytest.fixture
def database(test_settings):
    """Unconnected gateway; each test gets a fresh in-memory store."""
    return Database(test_settings, client_factory=MockMongoClient)


@pytest.fixture
async def connected_database(database):
    await database.connect()
    yield database
    await database.close()


@pytest.fixture
def test_app(test_settings, database):
    return create_app(test_settings, database=database)


@pytest.fixture
def client(test_app):
    """Test client with the lifespan running, so the store is connected."""
    with TestClient(test_app) as c:
        yield c


@pytest.fixture
def auth_headers():
    """Build the Authorization header for a token."""

    def _headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def register(client):
    """Register a user through the API and return the response body."""

    def _register(username=None, email=None, password="secret1"):
        username = username or f"user_{uuid4().hex[:8]}"
        email = email or f"{username}@example.com"
        response = client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def alice(register):
    return register("alice", "alice@x.com", "secret1")


@pytest.fixture
def bob(register):
    return register("bob", "bob@x.com", "secret2")
