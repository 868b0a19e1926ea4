"""
Configuration module for the shoppe client.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the commerce backend, payment provider and local storage.

    Attributes:
        STORE_API_URL: Base URL of the commerce admin API (versioned path included)
        STORE_API_KEY: Basic-auth user for the commerce API
        STORE_API_PASSWORD: Basic-auth password for the commerce API
        STORE_ACCESS_TOKEN: Access token sent instead of basic auth when set
        PAYMENT_API_URL: Base URL of the payment provider
        PAYMENT_API_KEY: Secret key for the payment provider
        PAYMENT_API_VERSION: Value of the Stripe-Version header
        SUCCESS_URL: Checkout redirect target after a completed payment
        CANCEL_URL: Checkout redirect target after a cancelled payment
        REQUEST_TIMEOUT: Transport timeout for HTTP requests in seconds
        USER_AGENT: User-Agent header sent with every request
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        PREFERENCES_DIR: Directory holding the preference namespace file
        PREFERENCES_NAMESPACE: Name of the preference namespace
    """

    # Commerce backend
    STORE_API_URL: str = Field(
        default="https://mad44-alex-android-team1.myshopify.com/admin/api/2024-04",
        description="Base URL of the commerce admin API",
    )
    STORE_API_KEY: Optional[str] = Field(
        default=None,
        description="Basic-auth user for the commerce API",
    )
    STORE_API_PASSWORD: Optional[str] = Field(
        default=None,
        description="Basic-auth password for the commerce API",
    )
    STORE_ACCESS_TOKEN: Optional[str] = Field(
        default=None,
        description="Access token header value, used instead of basic auth",
    )

    # Payment provider
    PAYMENT_API_URL: str = Field(
        default="https://api.stripe.com",
        description="Base URL of the payment provider",
    )
    PAYMENT_API_KEY: Optional[str] = Field(
        default=None,
        description="Secret key for the payment provider",
    )
    PAYMENT_API_VERSION: str = Field(
        default="2023-10-16",
        description="Payment provider API version header",
    )
    SUCCESS_URL: str = Field(
        default="https://example.com/success",
        description="Checkout redirect after payment",
    )
    CANCEL_URL: str = Field(
        default="https://example.com/cancel",
        description="Checkout redirect after cancellation",
    )

    # HTTP client configuration
    REQUEST_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        le=120.0,
        description="Transport timeout for HTTP requests in seconds",
    )
    USER_AGENT: str = Field(
        default="Shoppe-Client/1.0",
        description="User-Agent header",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    # Preference storage
    PREFERENCES_DIR: str = Field(
        default=".shoppe",
        description="Directory holding the preference namespace file",
    )
    PREFERENCES_NAMESPACE: str = Field(
        default="UserInfo",
        min_length=1,
        description="Preference namespace name",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("STORE_API_URL", "PAYMENT_API_URL", "SUCCESS_URL", "CANCEL_URL")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """
        Validate that URLs are properly formatted.

        Args:
            value: The URL to validate

        Returns:
            The validated URL without trailing slash

        Raises:
            ValueError: If URL is invalid
        """
        if not value:
            raise ValueError("URL cannot be empty")

        value = value.rstrip("/")

        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError(f"URL must start with http:// or https://, got: {value}")

        return value


# Global settings instance
settings = Settings()
