"""Public interface for the Venice AI adapter."""

from __future__ import annotations

from .schema import VeniceModel, VeniceResponse
from .translator import parse_catalog, translate_catalog, translate_model

__all__ = [
    "VeniceModel",
    "VeniceResponse",
    "parse_catalog",
    "translate_catalog",
    "translate_model",
]
