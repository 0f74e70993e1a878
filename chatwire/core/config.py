"""
Library configuration using pydantic-settings.
"""
import logging
from typing import Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8080/api/v1"


class Settings(BaseSettings):
    """Library settings, read from CHATWIRE_* environment variables."""

    # REST API
    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: Optional[str] = None
    token_type: str = "Bot"
    request_timeout: float = 10.0
    user_agent: str = "chatwire (https://github.com/chatwire/chatwire, 0.1.0)"

    # Logging
    log_level: Union[str, int] = "INFO"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="CHATWIRE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def normalize_api_base_url(cls, v: str) -> str:
        """Remove trailing slash from base URL for consistency."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        if v <= 0:
            logger.warning(
                "Non-positive request timeout %s configured, falling back to 10 seconds", v
            )
            return 10.0
        return v


settings = Settings()
