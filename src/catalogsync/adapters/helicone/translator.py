"""Translate Helicone registry payloads into source models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.adapters.catalog_fetcher import TranslatedCatalog
from catalogsync.adapters.modalities import sanitize_modalities
from catalogsync.domain.model import Cost, SourceModel, is_date_string

from .schema import HeliconeResponse

if TYPE_CHECKING:
    from .schema import HeliconeEndpoint, HeliconeModel, HeliconePricing


def model_file_id(registry_id: str) -> str:
    """Registry ids may contain ``/``; records are stored flat."""

    return registry_id.replace("/", "-")


def pick_endpoint(model: HeliconeModel) -> HeliconeEndpoint | None:
    """Prefer the endpoint served by the model's author, else the first listed."""

    if not model.endpoints:
        return None
    if model.author:
        for endpoint in model.endpoints:
            if endpoint.provider == model.author:
                return endpoint
    return model.endpoints[0]


def _supports(params: set[str], *names: str) -> bool:
    return any(name in params for name in names)


def _translate_pricing(pricing: HeliconePricing | None) -> Cost | None:
    if pricing is None:
        return None
    if all(
        value is None
        for value in (
            pricing.prompt,
            pricing.completion,
            pricing.cache_read,
            pricing.cache_write,
            pricing.reasoning,
        )
    ):
        return None
    return Cost(
        input=pricing.prompt or 0.0,
        output=pricing.completion or 0.0,
        reasoning=pricing.reasoning,
        cache_read=pricing.cache_read,
        cache_write=pricing.cache_write,
    )


def _release_date(training_date: str | None) -> str | None:
    if not training_date:
        return None
    candidate = training_date[:10]
    return candidate if is_date_string(candidate) else None


def translate_model(model: HeliconeModel) -> SourceModel:
    params = {param.lower() for param in model.supported_parameters or ()}
    endpoint = pick_endpoint(model)
    return SourceModel(
        model_id=model_file_id(model.id),
        name=model.name,
        release_date=_release_date(model.training_date),
        attachment=False,
        reasoning=_supports(params, "reasoning", "include_reasoning"),
        tool_call=_supports(params, "tools", "tool_choice"),
        temperature=_supports(params, "temperature"),
        open_weights=False,
        pricing=_translate_pricing(endpoint.pricing if endpoint is not None else None),
        context_limit=model.context_length,
        output_limit=model.max_output,
        input_modalities=sanitize_modalities(model.input_modalities),
        output_modalities=sanitize_modalities(model.output_modalities),
    )


def translate_catalog(response: HeliconeResponse) -> TranslatedCatalog:
    return TranslatedCatalog(models=[translate_model(model) for model in response.data.models])


def parse_catalog(payload: object) -> TranslatedCatalog:
    return translate_catalog(HeliconeResponse.model_validate(payload))
