"""
Configuration Settings.

This module defines the client configuration using Pydantic's BaseSettings.
Values are loaded from ``MAILCHIMP_*`` environment variables and an optional
``.env`` file without explicit dotenv loading.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MailChimpSettings(BaseSettings):
    """
    Settings for the MailChimp client.

    Examples:
    - MAILCHIMP_API_KEY=0123456789abcdef-us5 → settings.api_key
    - MAILCHIMP_TIMEOUT=10 → settings.timeout
    """

    model_config = SettingsConfigDict(
        env_prefix="MAILCHIMP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[str] = Field(
        default=None,
        description="API key in '<key>-<datacenter>' form, e.g. '0123456789abcdef-us5'.",
    )
    secure: bool = Field(default=True, description="Use https for API calls.")
    timeout: float = Field(
        default=30.0,
        ge=1,
        le=600,
        description="Request timeout (seconds) for HTTP operations.",
        examples=[30],
    )
    api_version: str = Field(default="1.3", description="API version path segment.")
    base_url: Optional[str] = Field(
        default=None,
        description="Override for the computed endpoint, e.g. a local stub server.",
        examples=["http://localhost:8080/1.3/"],
    )
    log_level: str = Field(default="INFO", description="Log level used by setup_logging.")
    log_format: Literal["simple", "detailed", "json"] = Field(
        default="detailed", description="Log format used by setup_logging."
    )
