"""Application configuration management."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised application settings derived from environment variables."""

    notification_endpoint_url: str = Field(
        default="http://localhost:5000/api/send-broadcast-email",
        description="Endpoint that accepts broadcast/assignment notification requests.",
    )
    notification_timeout_seconds: float | None = Field(default=None, gt=0)
    site_url: str = Field(
        default="",
        description="Public portal URL used for links inside notification emails.",
    )

    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=465, ge=1, le=65535)
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_use_ssl: bool = Field(default=True)
    mail_sender_name: str = Field(default="Cehpoint Portal")

    gemini_api_key: str | None = None
    gemini_model: str = Field(default="gemini-2.0-flash")

    firestore_project_id: str | None = None
    domains_collection: str = Field(default="domains")
    domain_catalog_path: Path = Field(default=Path(__file__).resolve().parent / "data" / "domains.yaml")
    seed_key: str | None = Field(
        default=None,
        description="Key required by the seed-domains endpoint; seeding is disabled when unset.",
    )

    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("seed_key")
    @classmethod
    def validate_seed_key(cls, value: str | None) -> str | None:
        """Reject placeholder seeding keys; leave seeding disabled when unset."""

        if value is None:
            return None
        if value.strip().lower() in {"", "seed123", "change-me", "changeme"}:
            raise ValueError(
                "SEED_KEY must be a private value. Update your .env file or unset it to disable seeding."
            )
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        upper = value.upper()
        if upper not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(valid))}")
        return upper


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance so it can be reused across the app."""

    settings = Settings()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings
