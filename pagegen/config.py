"""Pipeline configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Content source credentials and the development-mode flag."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Contentful
    contentful_access_token: str | None = None
    # Delivery and preview tokens are created and reused by the source when unset
    contentful_delivery_token: str | None = None
    contentful_preview_token: str | None = None
    contentful_space_id: str | None = None
    contentful_environment: str = "master"

    # Mode
    node_env: str = "production"
    log_level: str = "INFO"

    @property
    def is_dev(self) -> bool:
        return self.node_env == "development"

    def validate_source_credentials(self) -> None:
        """Ensure the credentials the content source cannot work without are set."""
        missing: list[str] = []
        if not self.contentful_access_token:
            missing.append("CONTENTFUL_ACCESS_TOKEN")
        if not self.contentful_space_id:
            missing.append("CONTENTFUL_SPACE_ID")

        if missing:
            joined = ", ".join(missing)
            raise ValueError(f"Missing content source credentials: {joined}")


@lru_cache
def get_settings() -> Settings:
    return Settings()
