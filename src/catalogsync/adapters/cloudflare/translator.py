"""Translate Cloudflare AI Gateway payloads into source models.

The gateway only reports ids, per-token prices and a creation timestamp. Every
other field comes from the existing record, a cross-referenced canonical record,
or the provider defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.adapters.catalog_fetcher import TranslatedCatalog
from catalogsync.adapters.pricing import per_million_tokens
from catalogsync.domain.model import Cost, SourceModel, date_from_timestamp

from .schema import CloudflareResponse

if TYPE_CHECKING:
    from .schema import CloudflareModel


def _non_negative_per_million(price_per_token: float) -> float:
    return max(per_million_tokens(price_per_token), 0.0)


def translate_model(model: CloudflareModel) -> SourceModel:
    return SourceModel(
        model_id=model.id,
        release_date=date_from_timestamp(model.created_at) if model.created_at else None,
        open_weights=False,
        pricing=Cost(
            input=_non_negative_per_million(model.cost_in),
            output=_non_negative_per_million(model.cost_out),
        ),
    )


def translate_catalog(response: CloudflareResponse) -> TranslatedCatalog:
    return TranslatedCatalog(
        models=[translate_model(model) for model in response.data if model.id.strip()]
    )


def parse_catalog(payload: object) -> TranslatedCatalog:
    return translate_catalog(CloudflareResponse.model_validate(payload))
