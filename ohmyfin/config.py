"""Client configuration and environment settings"""

from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SDK_VERSION = "1.0.0"
USER_AGENT = f"ohmyfin-python/{SDK_VERSION}"

DEFAULT_BASE_URL = "https://ohmyfin.ai"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ClientConfig(BaseModel):
    """Validated, immutable configuration owned by a client instance"""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("base_url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")


class Settings(BaseSettings):
    """SDK settings loaded from environment variables (OHMYFIN_*) or .env"""

    model_config = SettingsConfigDict(
        env_prefix="OHMYFIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials
    api_key: str | None = None

    # HTTP Client
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Logging
    service_name: str = "ohmyfin-python"
    log_level: str = "INFO"
