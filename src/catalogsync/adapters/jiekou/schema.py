"""Pydantic models describing the Jiekou.AI OpenAI-compatible model list."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from catalogsync.adapters.pricing import Price


class JiekouBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class JiekouModel(JiekouBaseModel):
    """Prices are in ten-thousandths of a USD per million tokens."""

    id: str
    created: int
    object: str
    owned_by: str | None = None
    title: str | None = None
    display_name: str | None = None
    description: str | None = None
    input_token_price_per_m: Price
    output_token_price_per_m: Price
    context_size: int
    max_output_tokens: int
    features: list[str] | None = None
    input_modalities: list[str] | None = None
    output_modalities: list[str] | None = None


class JiekouResponse(JiekouBaseModel):
    data: list[JiekouModel]
