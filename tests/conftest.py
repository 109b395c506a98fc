from __future__ import annotations

from typing import Optional

import pytest

from things_mcp.api import api_state
from things_mcp.config import AppSettings
from things_mcp.services import ServiceContext

from .helpers import RecordingOpener, make_settings


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def install_context(opener):
    """Install a service context for the tool handlers; returns a factory for custom settings."""

    def install(settings: Optional[AppSettings] = None) -> ServiceContext:
        context = ServiceContext(settings or make_settings(), opener=opener)
        api_state.install(context)
        return context

    yield install
    api_state.reset()


@pytest.fixture
def context(install_context) -> ServiceContext:
    return install_context()
