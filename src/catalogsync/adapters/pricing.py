"""Price conversions shared by provider translators."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Annotated

from pydantic import Field

TOKENS_PER_MILLION = Decimal(1_000_000)

# Catalog prices must be finite and non-negative.
Price = Annotated[float, Field(ge=0, allow_inf_nan=False)]


def _decimal(price: str | float) -> Decimal:
    try:
        return Decimal(str(price).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid price: {price!r}") from exc


def per_million_tokens(price_per_token: str | float) -> float:
    """Convert a per-token USD price to USD per million tokens.

    Goes through :class:`~decimal.Decimal` so ``"0.000003"`` becomes ``3.0``
    rather than ``2.9999999999999996``.
    """

    return float(_decimal(price_per_token) * TOKENS_PER_MILLION)


def scaled_price(price: str | float, divisor: int) -> float:
    """Divide a price quoted in sub-units, e.g. ten-thousandths of a USD."""

    return float(_decimal(price) / divisor)
