"""
Authentication schemas.

Request fields are optional at the schema level so that the service can
answer a missing field with its own 400 message instead of a generic
validation error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: Optional[str] = Field(default=None, description="Unique username")
    email: Optional[str] = Field(default=None, description="Unique email address")
    password: Optional[str] = Field(default=None, description="Password, at least 6 characters")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret1"
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: Optional[str] = Field(default=None, description="Account email")
    password: Optional[str] = Field(default=None, description="Account password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "secret1"
            }
        }
    )


class UserResponse(BaseModel):
    """Public user fields. The password hash never leaves the service."""

    id: str = Field(description="User unique identifier")
    username: str = Field(description="Username")
    email: str = Field(description="Email address")


class AuthResponse(BaseModel):
    """Token plus public user, returned by register and login."""

    message: str
    token: str = Field(description="Signed identity token, valid for 7 days")
    user: UserResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful!",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "user": {
                    "id": "66f1c2a9e4b0a1b2c3d4e5f6",
                    "username": "alice",
                    "email": "alice@example.com"
                }
            }
        }
    )
