"""Things URL scheme helpers."""

from __future__ import annotations

from .url import AUTH_TOKEN_PARAM, NAVIGATION_COMMANDS, ThingsUrlBuilder, encode_component

__all__ = ["AUTH_TOKEN_PARAM", "NAVIGATION_COMMANDS", "ThingsUrlBuilder", "encode_component"]
