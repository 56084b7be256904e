"""Public interface for the Vercel AI Gateway adapter."""

from __future__ import annotations

from .schema import VercelModel, VercelResponse
from .translator import parse_catalog, translate_catalog, translate_model

__all__ = [
    "VercelModel",
    "VercelResponse",
    "parse_catalog",
    "translate_catalog",
    "translate_model",
]
