from __future__ import annotations

import logging
import webbrowser
from typing import Callable, Mapping, Optional

from ..config import ThingsSettings
from ..domain import LaunchAccepted, Scalar
from ..errors import DispatchError, ThingsEnvironmentError
from ..things import ThingsUrlBuilder

logger = logging.getLogger(__name__)

Opener = Callable[[str], bool]

PLATFORM_UNAVAILABLE = (
    "Things app is only available on macOS. "
    "Please run this MCP server on a Mac with Things installed."
)


class CommandDispatcher:
    """Builds a Things URL and hands it to the OS default URL handler."""

    def __init__(self, settings: ThingsSettings, *, opener: Optional[Opener] = None) -> None:
        self._settings = settings
        self._check_platform()
        self._builder = ThingsUrlBuilder(scheme=settings.scheme, auth_token=settings.auth_token)
        self._opener = opener or webbrowser.open

    @property
    def builder(self) -> ThingsUrlBuilder:
        return self._builder

    def _check_platform(self) -> None:
        if not self._settings.is_platform_supported:
            raise ThingsEnvironmentError(PLATFORM_UNAVAILABLE)

    def dispatch(self, command: str, params: Optional[Mapping[str, Optional[Scalar]]] = None) -> LaunchAccepted:
        self._check_platform()
        url = self._builder.build(command, params)
        logger.info("Executing Things command: %s", self._builder.redact(url))
        try:
            accepted = self._opener(url)
        except (OSError, webbrowser.Error) as exc:
            logger.exception("Failed to open Things URL for command '%s'", command)
            raise DispatchError(f"Things command execution failed: {exc}") from exc
        if not accepted:
            logger.error("No handler accepted the Things URL for command '%s'", command)
            raise DispatchError(
                f"Things command execution failed: no application accepted the '{self._builder.scheme}:' URL."
            )
        return LaunchAccepted(command=command, url=url)
