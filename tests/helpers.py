from __future__ import annotations

from typing import Dict, List, Optional
from urllib.parse import unquote

from things_mcp.config import AppSettings, BatchSettings, LoggingSettings, ThingsSettings

TOKEN = "s3cr3t-token"


class RecordingOpener:
    """Stands in for ``webbrowser.open`` and remembers every URL it was given."""

    def __init__(self, accept: bool = True, error: Optional[Exception] = None) -> None:
        self.accept = accept
        self.error = error
        self.urls: List[str] = []

    def __call__(self, url: str) -> bool:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.accept

    @property
    def last(self) -> str:
        return self.urls[-1]


def make_settings(
    *,
    auth_token: Optional[str] = TOKEN,
    platform: str = "darwin",
    delay_seconds: float = 0.0,
) -> AppSettings:
    return AppSettings(
        things=ThingsSettings(auth_token=auth_token, scheme="things", platform=platform),
        batch=BatchSettings(delay_seconds=delay_seconds),
        logging=LoggingSettings(level="INFO", directory=None),
    )


def query_params(url: str) -> Dict[str, str]:
    """Split a Things URL query by hand so that '+' is never mistaken for a space."""

    _, _, query = url.partition("?")
    params: Dict[str, str] = {}
    for pair in query.split("&") if query else []:
        key, _, value = pair.partition("=")
        params[unquote(key)] = unquote(value)
    return params


def command_of(url: str) -> str:
    return url.split(":///", 1)[1].split("?", 1)[0]
