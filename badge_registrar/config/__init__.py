"""
Configuration Module
====================

Centralized configuration management using Pydantic Settings.
Loads from environment variables with type validation and defaults.

Settings are not built at import time; required StarkNet variables are
checked when the application calls `get_settings()` during startup.

Usage:
    from badge_registrar.config import get_settings

    settings = get_settings()
    print(settings.environment)
    print(settings.starknet.chain)
"""

from badge_registrar.config.settings import (
    Environment,
    LogLevel,
    Settings,
    StarkNetSettings,
    get_settings,
)

__all__ = [
    "Settings",
    "StarkNetSettings",
    "get_settings",
    "Environment",
    "LogLevel",
]
