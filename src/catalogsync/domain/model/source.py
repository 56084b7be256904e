"""Normalized projection of a provider's catalog entry."""

from __future__ import annotations

from dataclasses import dataclass

from .primitives import DateString, ModelId
from .record import Cost, ModalityList

type SourcePricing = Cost


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceModel:
    """What a provider adapter knows about one model.

    ``None`` means the provider has no opinion on the field this run; the
    reconciler then falls back to the existing record or a default.
    """

    model_id: ModelId
    name: str | None = None
    release_date: DateString | None = None
    attachment: bool | None = None
    reasoning: bool | None = None
    tool_call: bool | None = None
    structured_output: bool | None = None
    temperature: bool | None = None
    open_weights: bool | None = None
    pricing: SourcePricing | None = None
    context_limit: int | None = None
    input_limit: int | None = None
    output_limit: int | None = None
    input_modalities: ModalityList | None = None
    output_modalities: ModalityList | None = None
