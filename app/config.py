"""Application configuration and settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.constants import DEFAULT_BALANCE_BASE_URL, DEFAULT_EXPLORER_BASE_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Application (Heroku injects the release metadata)
    app_name: str = Field(
        default="Unknown Name",
        validation_alias=AliasChoices("HEROKU_APP_NAME", "APP_NAME"),
    )
    app_version: str = Field(
        default="Unknown Version",
        validation_alias=AliasChoices("HEROKU_RELEASE_VERSION", "APP_VERSION"),
    )
    debug: bool = False
    port: int = Field(default=8080, description="Server port (Heroku sets $PORT)")

    # Downstream webhook receiving normalized transactions
    api_update_url: str = Field(default="", description="Webhook URL (API_UPDATE_URL)")

    # Comma-separated monitored addresses (LTC_ADDRESS_LIST), env or .env
    ltc_address_list: str = ""

    # Address whose balance is reported by /transaction/total
    ltc_addr: str = ""

    # Upstream explorers
    explorer_base_url: str = DEFAULT_EXPLORER_BASE_URL
    balance_base_url: str = DEFAULT_BALANCE_BASE_URL
    http_timeout: float = 30.0

    # 0 keeps the fan-out unbounded
    max_concurrent_requests: int = Field(default=0, ge=0)

    static_dir: str = "public"

    @field_validator("explorer_base_url", "balance_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs so paths can be appended with a single slash."""
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
