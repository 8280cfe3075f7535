"""
Settings Module
===============

Pydantic-based configuration with environment variable loading.

Version: 0.1.0
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StarkNetSettings(BaseSettings):
    """StarkNet account and badge registry configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STARKNET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required
    chain: str = Field(..., description="TESTNET or MAINNET")
    account: str = Field(..., description="Account address (hex)")
    private_key: SecretStr = Field(..., description="Account private key (hex)")
    badge_registry_address: str = Field(..., description="Badge registry contract (hex)")

    rpc_url: str | None = Field(
        default=None,
        description="Overrides both endpoints of the selected network",
    )
    registration_entrypoint: str = "register_github_identity"

    # Confirmation polling
    poll_interval_seconds: float = Field(default=3.0, gt=0)
    confirmation_timeout_seconds: float | None = Field(default=600.0, gt=0)
    max_poll_attempts: int | None = Field(default=None, ge=1)
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("rpc_url", "confirmation_timeout_seconds", "max_poll_attempts", mode="before")
    @classmethod
    def empty_as_none(cls, v: object) -> object:
        """Treat empty environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Settings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables. The StarkNet section
    has required fields, so building settings fails fast when any of them
    is missing.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    service_name: str = "badge-registrar"

    # Blockchain configuration
    starknet: StarkNetSettings = Field(default_factory=StarkNetSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Ensure log level is uppercase."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton.

    Raises:
        pydantic.ValidationError: If a required variable is missing
    """
    return Settings()
