"""Construction of ``things:///`` URLs.

Keys and values are percent-encoded one component at a time (RFC 3986).
Form encoding (``urlencode``/``quote_plus``) turns spaces into ``+``, which
Things shows literally, so it must not be used here.
"""

from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import quote

from ..domain import Scalar
from ..errors import BuildError

AUTH_TOKEN_PARAM = "auth-token"
NAVIGATION_COMMANDS = frozenset({"show"})


def encode_component(value: Scalar) -> str:
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return quote(text, safe="")


class ThingsUrlBuilder:
    def __init__(self, scheme: str = "things", auth_token: Optional[str] = None) -> None:
        self._scheme = scheme
        self._auth_token = auth_token

    @property
    def scheme(self) -> str:
        return self._scheme

    def requires_auth(self, command: str) -> bool:
        return command not in NAVIGATION_COMMANDS

    def build(self, command: str, params: Optional[Mapping[str, Optional[Scalar]]] = None) -> str:
        if not command or not command.strip():
            raise BuildError("Things command must be a non-empty string.")
        if "/" in command:
            raise BuildError(f"Things command must be a single path segment, got '{command}'.")

        pairs: list[tuple[str, Scalar]] = []
        if self._auth_token and self.requires_auth(command):
            pairs.append((AUTH_TOKEN_PARAM, self._auth_token))
        for key, value in (params or {}).items():
            if value is None or key == AUTH_TOKEN_PARAM:
                continue
            pairs.append((key, value))

        try:
            query = "&".join(f"{encode_component(key)}={encode_component(value)}" for key, value in pairs)
        except (TypeError, ValueError, UnicodeError) as exc:
            raise BuildError(f"Failed to build Things URL for '{command}': {exc}") from exc

        base = f"{self._scheme}:///{quote(command, safe='-')}"
        return f"{base}?{query}" if query else base

    def redact(self, url: str) -> str:
        """Return ``url`` with the auth token masked, for logging."""

        if not self._auth_token:
            return url
        return url.replace(
            f"{AUTH_TOKEN_PARAM}={encode_component(self._auth_token)}",
            f"{AUTH_TOKEN_PARAM}=***",
        )


__all__ = ["AUTH_TOKEN_PARAM", "NAVIGATION_COMMANDS", "ThingsUrlBuilder", "encode_component"]
