"""Public interface for the Cloudflare AI Gateway adapter."""

from __future__ import annotations

from .schema import CloudflareModel, CloudflareResponse
from .translator import parse_catalog, translate_catalog, translate_model

__all__ = [
    "CloudflareModel",
    "CloudflareResponse",
    "parse_catalog",
    "translate_catalog",
    "translate_model",
]
