"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Profile Sync")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server (stub profile API)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    seed_demo_profiles: bool = Field(
        default=True,
        description="Populate the in-memory profile store with demo users on startup",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of the console format",
    )

    # Remote profile service
    profile_api_base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL exposing GET/PATCH /users/{id}",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every profile service request",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
