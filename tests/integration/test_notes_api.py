"""Notes CRUD through the HTTP API."""

import time
from datetime import datetime, timedelta

import pytest
from bson import ObjectId

from notebox.security import create_access_token


@pytest.fixture
def alice_headers(alice, auth_headers):
    return auth_headers(alice["token"])


@pytest.fixture
def bob_headers(bob, auth_headers):
    return auth_headers(bob["token"])


def _create(client, headers, title="T", content="C"):
    resp = client.post("/api/notes", json={"title": title, "content": content}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["noteId"]


def _notes(client, headers, note_filter=None):
    params = {"filter": note_filter} if note_filter else None
    resp = client.get("/api/notes", params=params, headers=headers)
    assert resp.status_code == 200
    return resp.json()["notes"]


class TestAuthRequired:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/notes"),
            ("post", "/api/notes"),
            ("delete", "/api/notes"),
            ("put", "/api/notes/66f1c2a9e4b0a1b2c3d4e5f1"),
            ("delete", "/api/notes/66f1c2a9e4b0a1b2c3d4e5f1"),
            ("post", "/api/notes/66f1c2a9e4b0a1b2c3d4e5f1/share"),
        ],
    )
    def test_no_token(self, client, method, path):
        resp = client.request(method, path)
        assert resp.status_code == 401
        assert resp.json() == {"message": "Access denied. No token provided."}

    def test_bad_token(self, client, auth_headers):
        resp = client.get("/api/notes", headers=auth_headers("not-a-jwt"))
        assert resp.status_code == 401
        assert resp.json() == {"message": "Invalid or expired token"}


def test_create_and_list(client, alice, alice_headers):
    note_id = _create(client, alice_headers, "Groceries", "milk, eggs")

    notes = _notes(client, alice_headers, "created")
    assert len(notes) == 1
    note = notes[0]
    assert note["id"] == note_id
    assert note["title"] == "Groceries"
    assert note["content"] == "milk, eggs"
    assert note["userId"] == alice["user"]["id"]
    assert note["createdAt"]
    assert note["isShared"] is None


def test_create_requires_title_and_content(client, alice_headers):
    resp = client.post("/api/notes", json={"title": "only a title"}, headers=alice_headers)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Title and content are required"}


def test_list_is_newest_first(client, alice_headers):
    first = _create(client, alice_headers, "first")
    time.sleep(0.01)
    second = _create(client, alice_headers, "second")

    ids = [n["id"] for n in _notes(client, alice_headers, "created")]
    assert ids == [second, first]


def test_filters_are_disjoint_and_cover_everything(client, alice_headers):
    _create(client, alice_headers)

    created = {n["id"] for n in _notes(client, alice_headers, "created")}
    shared = {n["id"] for n in _notes(client, alice_headers, "shared")}
    everything = {n["id"] for n in _notes(client, alice_headers)}
    unknown = {n["id"] for n in _notes(client, alice_headers, "bogus")}

    assert created and shared
    assert created.isdisjoint(shared)
    assert created | shared == everything == unknown


def test_update(client, alice_headers):
    note_id = _create(client, alice_headers, "old", "old body")

    resp = client.put(
        f"/api/notes/{note_id}", json={"title": "new", "content": "new body"}, headers=alice_headers
    )
    assert resp.status_code == 200
    assert resp.json() == {"message": "Note updated successfully!", "noteId": note_id}

    note = _notes(client, alice_headers, "created")[0]
    assert (note["title"], note["content"]) == ("new", "new body")
    assert note["updatedAt"] is not None


def test_update_requires_both_fields(client, alice_headers):
    note_id = _create(client, alice_headers)
    resp = client.put(f"/api/notes/{note_id}", json={"content": "x"}, headers=alice_headers)
    assert resp.status_code == 400


def test_other_users_notes_are_invisible(client, alice_headers, bob_headers):
    note_id = _create(client, alice_headers, "private", "alice only")

    update = client.put(
        f"/api/notes/{note_id}", json={"title": "x", "content": "y"}, headers=bob_headers
    )
    delete = client.delete(f"/api/notes/{note_id}", headers=bob_headers)

    assert update.status_code == delete.status_code == 404
    assert update.json() == delete.json() == {"message": "Note not found"}
    assert note_id not in {n["id"] for n in _notes(client, bob_headers)}

    note = _notes(client, alice_headers, "created")[0]
    assert note["title"] == "private"


@pytest.mark.parametrize("bad_id", ["123", "not-an-object-id", "zzzzzzzzzzzzzzzzzzzzzzzz"])
def test_malformed_id_is_not_found(client, alice_headers, bad_id):
    resp = client.delete(f"/api/notes/{bad_id}", headers=alice_headers)
    assert resp.status_code == 404

    resp = client.put(f"/api/notes/{bad_id}", json={"title": "t", "content": "c"}, headers=alice_headers)
    assert resp.status_code == 404


def test_delete_one(client, alice_headers):
    note_id = _create(client, alice_headers)

    resp = client.delete(f"/api/notes/{note_id}", headers=alice_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Note deleted successfully!", "deletedId": note_id}

    again = client.delete(f"/api/notes/{note_id}", headers=alice_headers)
    assert again.status_code == 404


def test_delete_all_only_touches_caller(client, alice_headers, bob_headers):
    _create(client, alice_headers)
    _create(client, alice_headers)
    bob_before = _notes(client, bob_headers)

    resp = client.delete("/api/notes", headers=alice_headers)
    assert resp.status_code == 200
    # two notes plus the welcome note
    assert resp.json() == {"message": "Cleared 3 notes!", "deletedCount": 3}

    assert _notes(client, alice_headers) == []
    assert _notes(client, bob_headers) == bob_before

    resp = client.delete("/api/notes", headers=alice_headers)
    assert resp.json()["deletedCount"] == 0


def test_valid_token_for_unknown_user_sees_no_notes(client):
    token = create_access_token(str(ObjectId()), "ghost")
    resp = client.get("/api/notes", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["notes"] == []


def _utc_offset(value: str) -> timedelta:
    return datetime.fromisoformat(value.replace("Z", "+00:00")).utcoffset()


def test_timestamps_are_returned_in_utc(client, alice_headers):
    note_id = _create(client, alice_headers)
    client.put(f"/api/notes/{note_id}", json={"title": "t", "content": "c"}, headers=alice_headers)

    notes = _notes(client, alice_headers)
    assert all(_utc_offset(n["createdAt"]) == timedelta(0) for n in notes)

    updated = next(n for n in notes if n["id"] == note_id)
    assert _utc_offset(updated["updatedAt"]) == timedelta(0)
