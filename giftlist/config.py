"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./giftlist.db")

    # Redis (celery broker for the session sweep)
    redis_url: str = Field(default="redis://localhost:6379/0")

    # Sessions
    session_ttl_minutes: int = Field(default=10080)  # 7 days
    session_sweep_interval_seconds: int = Field(default=3600)

    # Family groups
    invite_code_length: int = Field(default=6, ge=4, le=32)
    invite_code_max_attempts: int = Field(default=10, ge=1)

    # Wishlists
    activity_feed_limit: int = Field(default=10, ge=1, le=100)
    hide_reservations_from_owner: bool = Field(default=False)

    # API
    environment: str = Field(default="development")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5000",
            "http://localhost:5173",
        ]
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has durable, non-local settings."""
        if self.environment == "production":
            if self.database_url.startswith("sqlite"):
                raise ValueError("DATABASE_URL must not use SQLite in production")
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
