"""Configuration system for the domain model.

This module provides Pydantic Settings-based configuration with environment
variable support. The model classes never read configuration implicitly;
callers load a DomainModelConfig and pass the relevant values along.

Usage:
    from domain_model.config import DomainModelConfig
    from domain_model.logging_config import configure_logging

    config = DomainModelConfig()
    configure_logging(config)

    converted = wages.convert("EUR", strict=config.strict_currency)
"""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Supported log renderers."""

    CONSOLE = "console"
    JSON = "json"


class DomainModelConfig(BaseSettings):
    """Root configuration for the domain model.

    Environment Variables:
        DOMAIN_MODEL_ENV: Environment name (development, staging, production, test)
        DOMAIN_MODEL_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        DOMAIN_MODEL_LOG_FORMAT: Log renderer (console, json)
        DOMAIN_MODEL_STRICT_CURRENCY: Raise on unsupported currencies instead
            of returning the unconverted amount

    Example:
        config = DomainModelConfig(log_level="debug")
        if config.is_debug:
            print("Debug logging enabled")
    """

    model_config = SettingsConfigDict(
        env_prefix="DOMAIN_MODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(
        default="development",
        description="Environment name (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Renderer used for log output",
    )
    strict_currency: bool = Field(
        default=False,
        description="Raise UnsupportedCurrencyError instead of a silent no-op conversion",
    )

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        """Accept log format names in any case."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.env == "development"

    @property
    def is_debug(self) -> bool:
        """Check if debug logging is enabled."""
        return self.log_level == "DEBUG"
