"""Public interface for the FriendliAI adapter."""

from __future__ import annotations

from .schema import FriendliModel, FriendliResponse
from .translator import display_name, is_reasoning_model, parse_catalog, translate_catalog

__all__ = [
    "FriendliModel",
    "FriendliResponse",
    "display_name",
    "is_reasoning_model",
    "parse_catalog",
    "translate_catalog",
]
