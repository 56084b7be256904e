"""Translate Jiekou.AI payloads into source models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from catalogsync.adapters.catalog_fetcher import TranslatedCatalog
from catalogsync.adapters.modalities import sanitize_modalities
from catalogsync.adapters.pricing import scaled_price
from catalogsync.domain.model import Cost, Modality, SourceModel

from .schema import JiekouResponse

if TYPE_CHECKING:
    from .schema import JiekouModel

PRICE_DIVISOR: Final[int] = 10_000

OPEN_WEIGHTS_PATTERNS: Final[tuple[str, ...]] = (
    "deepseek",
    "qwen",
    "llama",
    "gemma",
    "mistral",
    "phi",
    "yi",
    "baichuan",
    "glm",
    "ernie",
    "minimax",
)

_ATTACHMENT_MODALITIES: Final[frozenset[Modality]] = frozenset(
    {Modality.IMAGE, Modality.VIDEO, Modality.AUDIO}
)


def is_open_weights(model_id: str) -> bool:
    lowered = model_id.lower()
    return any(pattern in lowered for pattern in OPEN_WEIGHTS_PATTERNS)


def translate_model(model: JiekouModel) -> SourceModel:
    features = set(model.features or ())
    input_modalities = sanitize_modalities(model.input_modalities)
    # No release date upstream; the record falls back to the run date.
    return SourceModel(
        model_id=model.id,
        name=model.id,
        attachment=not _ATTACHMENT_MODALITIES.isdisjoint(input_modalities),
        reasoning="reasoning" in features,
        tool_call="function-calling" in features,
        structured_output="structured-outputs" in features,
        temperature=True,
        open_weights=is_open_weights(model.id),
        pricing=Cost(
            input=scaled_price(model.input_token_price_per_m, PRICE_DIVISOR),
            output=scaled_price(model.output_token_price_per_m, PRICE_DIVISOR),
        ),
        context_limit=model.context_size,
        output_limit=model.max_output_tokens,
        input_modalities=input_modalities,
        output_modalities=sanitize_modalities(model.output_modalities),
    )


def translate_catalog(response: JiekouResponse) -> TranslatedCatalog:
    return TranslatedCatalog(models=[translate_model(model) for model in response.data])


def parse_catalog(payload: object) -> TranslatedCatalog:
    return translate_catalog(JiekouResponse.model_validate(payload))
