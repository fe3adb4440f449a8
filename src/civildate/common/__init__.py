"""Shared helpers that are not part of the date model."""

from __future__ import annotations

from .logging import configure_logging

__all__ = ["configure_logging"]
