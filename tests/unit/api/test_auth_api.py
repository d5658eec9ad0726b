"""Unit tests for auth API router (notebox/api/auth.py)."""

from typing import Any

from notebox.core.schemas.auth import AuthResponse, UserResponse
from notebox.core.schemas.common import ErrorResponse
from notebox.core.services.auth_service import AuthService


def _json_ok(resp) -> dict[str, Any]:
    assert resp.status_code in (200, 201)
    return resp.json()


def _auth_response(message, username, email):
    return AuthResponse(
        message=message,
        token="tok",
        user=UserResponse(id="66f1c2a9e4b0a1b2c3d4e5f1", username=username, email=email),
    )


def test_register_calls_service(monkeypatch, client):
    called = {}

    async def fake_register_user(self, request):
        called["request"] = request
        return _auth_response("User registered successfully", request.username, request.email)

    monkeypatch.setattr(AuthService, "register_user", fake_register_user, raising=True)

    resp = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@x.com", "password": "secret1"},
    )
    assert resp.status_code == 201
    data = _json_ok(resp)
    assert data["user"] == {
        "id": "66f1c2a9e4b0a1b2c3d4e5f1",
        "username": "alice",
        "email": "alice@x.com",
    }
    assert data["token"] == "tok"
    assert called["request"].password == "secret1"


def test_login_calls_service(monkeypatch, client):
    async def fake_auth(self, request):
        return _auth_response("Login successful!", "alice", request.email)

    monkeypatch.setattr(AuthService, "authenticate_user", fake_auth, raising=True)

    resp = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "secret1"})
    data = _json_ok(resp)
    assert data["message"] == "Login successful!"
    assert set(data) == {"message", "token", "user"}


def test_non_object_body_is_400(client):
    resp = client.post("/api/auth/login", json=["alice@x.com", "secret1"])
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request body"


def test_missing_fields_reach_service_message(client):
    resp = client.post("/api/auth/register", json={"username": "alice"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Please provide username, email, and password"}


def test_invalid_body_matches_documented_error_schema(client):
    resp = client.post("/api/auth/register", json={"username": 42})
    assert resp.status_code == 400
    body = ErrorResponse.model_validate(resp.json())
    assert body.message == "Invalid request body"
    assert body.errors and body.errors[0]["loc"] == ["body", "username"]

    schema = client.app.openapi()
    ref = schema["paths"]["/api/auth/register"]["post"]["responses"]["400"]["content"][
        "application/json"
    ]["schema"]["$ref"]
    assert ref.endswith("/ErrorResponse")
