"""Translate FriendliAI payloads into source models."""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING, Final

from catalogsync.adapters.catalog_fetcher import TranslatedCatalog
from catalogsync.domain.model import Cost, Modality, SourceModel, date_from_timestamp

from .schema import FriendliResponse

if TYPE_CHECKING:
    from .schema import FriendliModel, FriendliPricing

log = getLogger(__name__)

# The catalog has no reasoning flag yet; instruct variants of these lines are plain chat models.
_NON_REASONING_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"llama-3\.\d.*instruct", re.IGNORECASE),
    re.compile(r"qwen3.*instruct", re.IGNORECASE),
)
_WORD_START: Final[re.Pattern[str]] = re.compile(r"\b\w")


def display_name(repo_name: str) -> str:
    """``meta-llama/Llama-3.3-70B-Instruct`` -> ``Llama 3.3 70B Instruct``."""

    model_name = repo_name.rsplit("/", 1)[-1]
    return _WORD_START.sub(lambda match: match.group().upper(), model_name.replace("-", " "))


def is_reasoning_model(model_id: str) -> bool:
    return not any(pattern.search(model_id) for pattern in _NON_REASONING_PATTERNS)


def _translate_pricing(model_id: str, pricing: FriendliPricing) -> Cost | None:
    if pricing.unit_type != "TOKEN":
        log.info("%s uses %s pricing; cost omitted", model_id, pricing.unit_type)
        return None
    return Cost(input=pricing.input, output=pricing.output)


def translate_model(model: FriendliModel) -> SourceModel:
    return SourceModel(
        model_id=model.id,
        name=display_name(model.name),
        release_date=date_from_timestamp(model.created),
        attachment=False,
        reasoning=is_reasoning_model(model.id),
        tool_call=model.functionality.tool_call,
        structured_output=model.functionality.structured_output,
        temperature=True,
        open_weights=bool(model.hugging_face_url),
        pricing=_translate_pricing(model.id, model.pricing),
        context_limit=model.context_length,
        output_limit=model.max_completion_tokens,
        input_modalities=(Modality.TEXT,),
        output_modalities=(Modality.TEXT,),
    )


def translate_catalog(response: FriendliResponse) -> TranslatedCatalog:
    return TranslatedCatalog(models=[translate_model(model) for model in response.data])


def parse_catalog(payload: object) -> TranslatedCatalog:
    return translate_catalog(FriendliResponse.model_validate(payload))
