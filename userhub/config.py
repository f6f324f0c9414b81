"""
UserHub configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .version import __version__


class UserHubConfig(BaseSettings):
    """
    UserHub client configuration settings.

    Can be loaded from:
    1. Environment variables (USERHUB_BASE_URL, USERHUB_TIMEOUT, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = UserHubConfig()

        # Direct instantiation
        config = UserHubConfig(base_url="https://api.userhub.example", timeout=10)
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="USERHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote service
    base_url: str = Field(
        ...,
        description="UserHub API base URL (e.g., https://api.userhub.example)",
    )

    # Transport
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates of the remote service",
    )

    user_agent: str = Field(
        default=f"userhub-python/{__version__}",
        description="User-Agent header sent with every request",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    proxy: Optional[str] = Field(
        default=None,
        description="Optional HTTP(S) proxy URL",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL is an http(s) URL."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("base_url must start with https:// or http://")
        return v.rstrip("/")


def load_config(**kwargs) -> UserHubConfig:
    """
    Load UserHub configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (USERHUB_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        UserHubConfig instance

    Raises:
        ValidationError: If required fields are missing or invalid
    """
    return UserHubConfig(**kwargs)
