"""Configuration via environment variables."""

from .settings import (
    FaultSettings,
    LoggingSettings,
    OptionKitSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "OptionKitSettings",
    "LoggingSettings",
    "FaultSettings",
    "get_settings",
    "clear_settings_cache",
]
