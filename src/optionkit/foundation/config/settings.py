"""Environment-based configuration using pydantic-settings.

Example:
    >>> from optionkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.faults.log_captured
    True

    # Or with environment variables:
    # OPTIONKIT_LOG_LEVEL=DEBUG
    # OPTIONKIT_FAULT_INCLUDE_TRACE=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationInfo, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OPTIONKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", "format", mode="before")
    @classmethod
    def _normalize_case(cls, v: str, info: ValidationInfo) -> str:
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "level" else v.lower()


class FaultSettings(BaseSettings):
    """How the capturing combinators report the faults they swallow."""

    model_config = SettingsConfigDict(
        env_prefix="OPTIONKIT_FAULT_",
        extra="ignore",
    )

    log_captured: bool = Field(default=True, description="Emit a debug event for every captured fault")
    include_trace: bool = Field(default=False, description="Attach formatted tracebacks to logged faults")


class OptionKitSettings(BaseSettings):
    """Root settings for optionkit.

    Loads configuration from environment variables with OPTIONKIT_ prefix.

    Example environment variables:
        OPTIONKIT_LOG_LEVEL=DEBUG
        OPTIONKIT_LOG_FORMAT=json
        OPTIONKIT_FAULT_LOG_CAPTURED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="OPTIONKIT_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    faults: FaultSettings = Field(default_factory=FaultSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> OptionKitSettings:
    """Get the global settings instance (cached)."""
    return OptionKitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
