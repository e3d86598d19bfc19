from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SITE_URL = "http://localhost:3000"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    # Site
    site_url: str = Field(
        default=DEFAULT_SITE_URL,
        validation_alias=AliasChoices("NEXT_PUBLIC_SITE_URL", "SITE_URL", "site_url"),
    )
    site_name: str = "Mi Sitio Optimizado"
    default_description: str = "Aprende sobre optimización SEO y rendimiento en Next.js"
    default_locale: str = "es_ES"

    # Logging
    log_level: str = "INFO"

    @field_validator("site_url")
    @classmethod
    def _normalise_site_url(cls, value: str) -> str:
        # An exported-but-empty variable counts as unset.
        value = value.strip()
        if not value:
            return DEFAULT_SITE_URL
        return value.rstrip("/")


settings = Settings()
