"""Venice catalog translation from a captured payload."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from catalogsync.adapters.venice import parse_catalog
from catalogsync.domain.model import Cost, CostTier, Modality

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalogsync.adapters.catalog_fetcher import TranslatedCatalog


@pytest.fixture
def catalog(load_payload: Callable[[str], object]) -> TranslatedCatalog:
    return parse_catalog(load_payload("venice_models.json"))


def test_text_model_capabilities(catalog: TranslatedCatalog) -> None:
    qwen = catalog.models[0]

    assert qwen.model_id == "qwen3-235b"
    assert qwen.name == "Venice Large"
    assert qwen.release_date == "2025-03-18"
    assert qwen.reasoning is True
    assert qwen.tool_call is True
    assert qwen.structured_output is True
    assert qwen.attachment is False
    assert qwen.open_weights is True
    assert qwen.context_limit == 131_072
    assert qwen.output_limit == 32_768
    assert qwen.pricing == Cost(input=0.9, output=4.5)
    assert qwen.input_modalities == (Modality.TEXT,)


def test_extended_pricing_and_vision(catalog: TranslatedCatalog) -> None:
    opus = catalog.models[1]

    assert opus.release_date == "2024-10-03"
    assert opus.attachment is True
    assert opus.structured_output is False
    assert opus.open_weights is False
    assert opus.input_modalities == (Modality.TEXT, Modality.IMAGE)
    assert opus.pricing == Cost(
        input=6,
        output=30,
        cache_read=0.6,
        context_over_200k=CostTier(input=12, output=45),
    )


def test_nothing_is_unsupported(catalog: TranslatedCatalog) -> None:
    assert catalog.unsupported_ids == []
