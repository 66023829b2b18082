"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AbrSettings(BaseModel):
    """Access to the Australian Business Register JSON web services."""

    guid: SecretStr | None = Field(
        default=None,
        description="Authentication GUID issued by the ABR web services registration.",
    )
    base_url: AnyHttpUrl = Field(default="https://abr.business.gov.au/json/")
    max_name_results: int = Field(default=10, ge=1, le=200)
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)
    retry_attempts: int = Field(default=3, ge=1, le=5)
    retry_base_delay: float = Field(default=0.5, ge=0.0, le=10.0)

    @field_validator("guid", mode="before")
    @classmethod
    def _empty_guid_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LookupSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ABN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    locale: str = "en"

    abr: AbrSettings = Field(default_factory=AbrSettings)


@lru_cache
def get_settings() -> LookupSettings:
    """Return cached settings instance."""

    return LookupSettings()


__all__ = [
    "AbrSettings",
    "LookupSettings",
    "get_settings",
]
