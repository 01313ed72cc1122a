"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="CODETRACK_", extra="ignore"
    )

    # Database
    database_url: str = Field(default="sqlite:///./codetrack.db")

    # Sessions
    session_cookie_name: str = Field(default="codetrack")
    session_max_age_seconds: int = Field(default=604800)  # 7 days
    session_cookie_secure: bool = Field(default=False)

    # Passwords
    password_schemes: list[str] = Field(default_factory=lambda: ["pbkdf2_sha256"])

    # Server
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")

    environment: str = Field(default="development")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if not self.session_cookie_secure:
                raise ValueError("SESSION_COOKIE_SECURE must be enabled in production")
            if self.database_url.startswith("sqlite:///:memory:"):
                raise ValueError("DATABASE_URL must point to a durable store in production")
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
