"""Translate between stored TOML documents and domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from catalogsync.domain.model import (
    Cost,
    CostTier,
    ExistingLimit,
    ExistingModalities,
    ExistingRecord,
    InterleavedField,
)

if TYPE_CHECKING:
    from catalogsync.domain.model import Interleaved, ModelId

    from .schema import StoredCost, StoredCostTier, StoredInterleaved, StoredModelDocument


def _translate_tier(tier: StoredCostTier) -> CostTier:
    return CostTier(
        input=tier.input,
        output=tier.output,
        reasoning=tier.reasoning,
        cache_read=tier.cache_read,
        cache_write=tier.cache_write,
        input_audio=tier.input_audio,
        output_audio=tier.output_audio,
    )


def _translate_cost(cost: StoredCost | None) -> Cost | None:
    if cost is None:
        return None
    extended = cost.context_over_200k
    return Cost(
        input=cost.input,
        output=cost.output,
        reasoning=cost.reasoning,
        cache_read=cost.cache_read,
        cache_write=cost.cache_write,
        input_audio=cost.input_audio,
        output_audio=cost.output_audio,
        context_over_200k=_translate_tier(extended) if extended is not None else None,
    )


def _translate_interleaved(
    value: Literal[True] | StoredInterleaved | None,
) -> Interleaved | None:
    if value is None or value is True:
        return value
    return InterleavedField(value.field)


def to_existing_record(document: StoredModelDocument, model_id: ModelId) -> ExistingRecord:
    modalities = document.modalities
    return ExistingRecord(
        model_id=model_id,
        name=document.name,
        family=document.family,
        attachment=document.attachment,
        reasoning=document.reasoning,
        tool_call=document.tool_call,
        structured_output=document.structured_output,
        temperature=document.temperature,
        knowledge=document.knowledge,
        release_date=document.release_date,
        last_updated=document.last_updated,
        open_weights=document.open_weights,
        interleaved=_translate_interleaved(document.interleaved),
        status=document.status,
        cost=_translate_cost(document.cost),
        limit=ExistingLimit(
            context=document.limit.context,
            input=document.limit.input,
            output=document.limit.output,
        ),
        modalities=ExistingModalities(
            input=tuple(modalities.input) if modalities.input is not None else None,
            output=tuple(modalities.output) if modalities.output is not None else None,
        ),
    )
