from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

SUPPORTED_PLATFORM = "darwin"


@dataclass(frozen=True)
class ThingsSettings:
    auth_token: Optional[str]
    scheme: str
    platform: str

    @property
    def is_platform_supported(self) -> bool:
        return self.platform == SUPPORTED_PLATFORM

    @property
    def has_auth_token(self) -> bool:
        return bool(self.auth_token)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.auth_token:
            missing.append("THINGS_AUTHENTICATION_TOKEN")
        return missing


@dataclass(frozen=True)
class BatchSettings:
    delay_seconds: float
    max_add_items: int = 20
    max_update_items: int = 20
    max_complete_items: int = 50


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Optional[str]


@dataclass(frozen=True)
class AppSettings:
    things: ThingsSettings
    batch: BatchSettings
    logging: LoggingSettings


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return max(value, 0.0)


def load_settings() -> AppSettings:
    """Read settings from the process environment (and any ``.env`` file)."""

    things = ThingsSettings(
        auth_token=os.getenv("THINGS_AUTHENTICATION_TOKEN") or None,
        scheme=os.getenv("THINGS_URL_SCHEME", "things"),
        platform=sys.platform,
    )
    batch = BatchSettings(
        delay_seconds=_float_from_env("THINGS_MCP_BATCH_DELAY_SECONDS", 0.1),
    )
    logging = LoggingSettings(
        level=os.getenv("THINGS_MCP_LOG_LEVEL", "INFO").upper(),
        directory=os.getenv("THINGS_MCP_LOG_DIR"),
    )
    return AppSettings(things=things, batch=batch, logging=logging)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return load_settings()
