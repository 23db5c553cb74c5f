"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
        populate_by_name=True,
    )

    supabase_url: str | None = Field(
        default=None,
        description="Base URL of the Supabase project serving the REST tables",
        validation_alias=AliasChoices("SUPABASE_URL", "EXPO_PUBLIC_SUPABASE_URL"),
    )
    supabase_anon_key: str | None = Field(
        default=None,
        description="Public anon key used by client-side table access",
        validation_alias=AliasChoices(
            "SUPABASE_ANON_KEY", "EXPO_PUBLIC_SUPABASE_ANON_KEY"
        ),
    )
    supabase_service_role_key: str | None = Field(
        default=None,
        description="Service role key used by the webhook to read push tokens",
        validation_alias=AliasChoices("SUPABASE_SERVICE_ROLE_KEY"),
    )
    webhook_secret: str | None = Field(
        default=None,
        description="Shared secret expected in the x-webhook-secret header",
        validation_alias=AliasChoices("WEBHOOK_SECRET"),
    )
    webhook_allow_unauthenticated: bool = Field(
        default=False,
        description=(
            "Accept webhook calls without a secret check when WEBHOOK_SECRET is unset"
        ),
        validation_alias=AliasChoices("WEBHOOK_ALLOW_UNAUTHENTICATED"),
    )
    expo_push_url: str = Field(
        default=DEFAULT_EXPO_PUSH_URL,
        description="Expo push gateway endpoint receiving message batches",
        min_length=1,
        validation_alias=AliasChoices("EXPO_PUSH_URL"),
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to outbound Supabase and Expo requests",
        gt=0,
        validation_alias=AliasChoices("HTTP_TIMEOUT_SECONDS"),
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp and display notification times",
        validation_alias=AliasChoices("APP_TIMEZONE"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_EXPO_PUSH_URL", "Settings", "get_settings", "reset_settings_cache"]
