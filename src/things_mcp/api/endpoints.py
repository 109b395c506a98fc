"""Imports every tool module so their ``register_api`` decorators run."""

from __future__ import annotations

from . import add, batch, search, show, templates, update  # noqa: F401
