"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    SUPPORTED_PLATFORM,
    AppSettings,
    BatchSettings,
    LoggingSettings,
    ThingsSettings,
    get_settings,
    load_settings,
)

__all__ = [
    "SUPPORTED_PLATFORM",
    "AppSettings",
    "BatchSettings",
    "LoggingSettings",
    "ThingsSettings",
    "get_settings",
    "load_settings",
]
