"""
Configuration package for the Hello Madurai portal backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    TranslationSettings,
    PushSettings,
    DatabaseSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "TranslationSettings",
    "PushSettings",
    "DatabaseSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
