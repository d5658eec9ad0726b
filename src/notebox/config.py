"""
App configuration - using pydantic settings for env vars
"""

from fastapi import Request
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="Notebox API")
    debug: bool = Field(default=False)  # set to True for dev
    environment: str = Field(default="development", description="Environment name")

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    reload: bool = Field(default=False)

    # MongoDB
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection string"
    )
    database_name: str = Field(default="noteapp", description="Database holding users and notes")

    # JWT
    jwt_secret: str = Field(
        default="change-me-in-production", description="Secret used to sign identity tokens"
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_days: int = Field(
        default=7, description="Identity token lifetime in days"
    )

    # Password hashing work factor
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, description="bcrypt cost factor")

    # Static assets
    public_dir: str = Field(default="public", description="Directory served at the site root")

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], description="CORS allowed origins"
    )
    cors_allow_credentials: bool = Field(default=True, description="CORS allow credentials")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=True, description="Write rotating log files")
    log_dir: str = Field(default="logs", description="Directory for log files")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return getattr(request.app.state, "settings", None) or settings
