"""Pydantic models describing the Vercel AI Gateway model catalog."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_decimal(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal price: {value!r}") from exc
    if not price.is_finite() or price < 0:
        raise ValueError(f"not a non-negative price: {value!r}")
    return value


class VercelBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ModelType(StrEnum):
    LANGUAGE = "language"
    EMBEDDING = "embedding"
    IMAGE = "image"
    VIDEO = "video"


class PricingTier(VercelBaseModel):
    cost: str
    min: float
    max: float | None = None

    _check_cost = field_validator("cost")(_check_decimal)


class VercelPricing(VercelBaseModel):
    """Prices are decimal strings in USD per token."""

    input: str | None = None
    output: str | None = None
    input_cache_read: str | None = None
    input_cache_write: str | None = None
    input_tiers: list[PricingTier] | None = None
    output_tiers: list[PricingTier] | None = None
    input_cache_read_tiers: list[PricingTier] | None = None
    input_cache_write_tiers: list[PricingTier] | None = None

    _check_prices = field_validator(
        "input", "output", "input_cache_read", "input_cache_write"
    )(_check_decimal)


class VercelModel(VercelBaseModel):
    id: str
    name: str
    created: int
    released: int | None = None
    context_window: int
    max_tokens: int
    type: ModelType
    tags: list[str] = Field(default_factory=list)
    pricing: VercelPricing | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: object) -> object:
        return [] if value is None else value


class VercelResponse(VercelBaseModel):
    data: list[VercelModel]
