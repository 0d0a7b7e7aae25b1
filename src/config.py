"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Support Meet"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Database (MongoDB)
    mongodb_uri: str = Field(default="mongodb://localhost:27017")
    mongodb_database: str = Field(default="kyc")
    mongodb_collection: str = Field(default="meetings")

    # Daily (video room provider)
    daily_api_key: str | None = Field(default=None)
    daily_api_url: str = Field(default="https://api.daily.co/v1")
    daily_base_url: str = Field(
        default="",
        description="Prefix joined with a room name to build the meeting link",
    )
    daily_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Deadline for provider calls; unset means no deadline",
    )

    # Room assignment
    default_agent_id: str = Field(default="agent1")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
