"""Public interface for the Jiekou.AI adapter."""

from __future__ import annotations

from .schema import JiekouModel, JiekouResponse
from .translator import is_open_weights, parse_catalog, translate_catalog

__all__ = [
    "JiekouModel",
    "JiekouResponse",
    "is_open_weights",
    "parse_catalog",
    "translate_catalog",
]
