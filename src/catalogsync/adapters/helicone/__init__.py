"""Public interface for the Helicone registry adapter."""

from __future__ import annotations

from .schema import HeliconeModel, HeliconeResponse
from .translator import parse_catalog, pick_endpoint, sanitize_modalities, translate_catalog

__all__ = [
    "HeliconeModel",
    "HeliconeResponse",
    "parse_catalog",
    "pick_endpoint",
    "sanitize_modalities",
    "translate_catalog",
]
