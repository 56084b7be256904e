"""Translate Venice AI payloads into source models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.adapters.catalog_fetcher import TranslatedCatalog
from catalogsync.domain.model import Cost, CostTier, Modality, SourceModel, date_from_timestamp

from .schema import VeniceResponse

if TYPE_CHECKING:
    from catalogsync.domain.model import ModalityList

    from .schema import Capabilities, ExtendedPricing, ModelSpec, PriceAmount, VeniceModel


def _usd(amount: PriceAmount | None) -> float | None:
    return amount.usd if amount is not None else None


def _translate_extended(extended: ExtendedPricing | None) -> CostTier | None:
    if extended is None:
        return None
    return CostTier(
        input=extended.input.usd,
        output=extended.output.usd,
        cache_read=_usd(extended.cache_input),
        cache_write=_usd(extended.cache_write),
    )


def _translate_pricing(spec: ModelSpec) -> Cost | None:
    pricing = spec.pricing
    if pricing is None:
        return None
    return Cost(
        input=pricing.input.usd,
        output=pricing.output.usd,
        cache_read=_usd(pricing.cache_input),
        cache_write=_usd(pricing.cache_write),
        context_over_200k=_translate_extended(pricing.extended),
    )


def _input_modalities(capabilities: Capabilities) -> ModalityList:
    modalities = [Modality.TEXT]
    if capabilities.supports_vision:
        modalities.append(Modality.IMAGE)
    if capabilities.supports_audio_input:
        modalities.append(Modality.AUDIO)
    if capabilities.supports_video_input:
        modalities.append(Modality.VIDEO)
    return tuple(modalities)


def _open_weights(spec: ModelSpec) -> bool:
    if spec.model_source:
        return "huggingface" in spec.model_source.lower()
    return spec.privacy == "private"


def translate_model(model: VeniceModel) -> SourceModel:
    spec = model.model_spec
    capabilities = spec.capabilities
    context = spec.available_context_tokens
    return SourceModel(
        model_id=model.id,
        name=spec.name,
        release_date=date_from_timestamp(model.created) if model.created else None,
        attachment=bool(
            capabilities.supports_vision
            or capabilities.supports_audio_input
            or capabilities.supports_video_input
        ),
        reasoning=bool(capabilities.supports_reasoning),
        tool_call=bool(capabilities.supports_function_calling),
        structured_output=bool(capabilities.supports_response_schema),
        temperature=True,
        open_weights=_open_weights(spec),
        pricing=_translate_pricing(spec),
        context_limit=context,
        # Venice publishes no output cap; a quarter of the context is the working assumption.
        output_limit=context // 4,
        input_modalities=_input_modalities(capabilities),
        output_modalities=(Modality.TEXT,),
    )


def translate_catalog(response: VeniceResponse) -> TranslatedCatalog:
    return TranslatedCatalog(models=[translate_model(model) for model in response.data])


def parse_catalog(payload: object) -> TranslatedCatalog:
    return translate_catalog(VeniceResponse.model_validate(payload))
