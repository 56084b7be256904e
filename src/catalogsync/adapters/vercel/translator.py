"""Translate Vercel AI Gateway payloads into source models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from catalogsync.adapters.catalog_fetcher import TranslatedCatalog
from catalogsync.adapters.pricing import per_million_tokens
from catalogsync.domain.model import (
    Cost,
    CostTier,
    Modality,
    SourceModel,
    date_from_timestamp,
)

from .schema import ModelType, VercelResponse

if TYPE_CHECKING:
    from catalogsync.domain.model import ModalityList

    from .schema import PricingTier, VercelModel, VercelPricing

UNSUPPORTED_TYPES: Final[frozenset[ModelType]] = frozenset({ModelType.IMAGE, ModelType.VIDEO})
EXTENDED_CONTEXT_THRESHOLD: Final[int] = 200_000


def _input_modalities(tags: set[str]) -> ModalityList:
    modalities = [Modality.TEXT]
    if "vision" in tags:
        modalities.append(Modality.IMAGE)
    if "file-input" in tags:
        modalities.append(Modality.PDF)
    return tuple(modalities)


def _output_modalities(model_type: ModelType, tags: set[str]) -> ModalityList:
    if model_type is ModelType.IMAGE or "image-generation" in tags:
        return (Modality.TEXT, Modality.IMAGE)
    if model_type is ModelType.VIDEO:
        return (Modality.TEXT, Modality.VIDEO)
    return (Modality.TEXT,)


def _first_tier(tiers: list[PricingTier] | None, flat: str | None) -> str | None:
    if tiers:
        return tiers[0].cost
    return flat


def _tier_from(tiers: list[PricingTier] | None, threshold: int) -> str | None:
    for tier in tiers or ():
        if tier.min >= threshold:
            return tier.cost
    return None


def _optional_price(value: str | None) -> float | None:
    return per_million_tokens(value) if value is not None else None


def _extended_tier(pricing: VercelPricing) -> CostTier | None:
    input_price = _tier_from(pricing.input_tiers, EXTENDED_CONTEXT_THRESHOLD)
    output_price = _tier_from(pricing.output_tiers, EXTENDED_CONTEXT_THRESHOLD)
    if input_price is None or output_price is None:
        return None
    return CostTier(
        input=per_million_tokens(input_price),
        output=per_million_tokens(output_price),
        cache_read=_optional_price(
            _tier_from(pricing.input_cache_read_tiers, EXTENDED_CONTEXT_THRESHOLD)
        ),
    )


def _translate_pricing(pricing: VercelPricing | None) -> Cost | None:
    if pricing is None:
        return None
    input_price = _first_tier(pricing.input_tiers, pricing.input)
    output_price = _first_tier(pricing.output_tiers, pricing.output)
    if input_price is None or output_price is None:
        return None
    return Cost(
        input=per_million_tokens(input_price),
        output=per_million_tokens(output_price),
        cache_read=_optional_price(
            _first_tier(pricing.input_cache_read_tiers, pricing.input_cache_read)
        ),
        cache_write=_optional_price(
            _first_tier(pricing.input_cache_write_tiers, pricing.input_cache_write)
        ),
        context_over_200k=_extended_tier(pricing),
    )


def translate_model(model: VercelModel) -> SourceModel:
    tags = set(model.tags)
    return SourceModel(
        model_id=model.id,
        name=model.name,
        release_date=date_from_timestamp(model.released) if model.released else None,
        attachment="vision" in tags or "file-input" in tags,
        reasoning="reasoning" in tags,
        tool_call="tool-use" in tags,
        temperature=True,
        pricing=_translate_pricing(model.pricing),
        context_limit=model.context_window,
        output_limit=model.max_tokens,
        input_modalities=_input_modalities(tags),
        output_modalities=_output_modalities(model.type, tags),
    )


def translate_catalog(response: VercelResponse) -> TranslatedCatalog:
    catalog = TranslatedCatalog()
    for model in response.data:
        if model.type in UNSUPPORTED_TYPES:
            catalog.unsupported_ids.append(model.id)
            continue
        catalog.models.append(translate_model(model))
    return catalog


def parse_catalog(payload: object) -> TranslatedCatalog:
    return translate_catalog(VercelResponse.model_validate(payload))
