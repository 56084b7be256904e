"""Vercel catalog translation from a captured payload."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pydantic
import pytest

from catalogsync.adapters.vercel import parse_catalog
from catalogsync.domain.model import Cost, CostTier, Modality

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def payload(load_payload: Callable[[str], object]) -> object:
    return load_payload("vercel_models.json")


def test_image_models_are_unsupported(payload: object) -> None:
    catalog = parse_catalog(payload)

    assert catalog.unsupported_ids == ["bfl/flux-pro-1.1"]
    assert [model.model_id for model in catalog.models] == [
        "anthropic/claude-sonnet-4",
        "google/gemini-2.5-pro",
        "openai/text-embedding-3-small",
    ]


def test_flat_pricing_and_capabilities(payload: object) -> None:
    sonnet = parse_catalog(payload).models[0]

    assert sonnet.name == "Claude Sonnet 4"
    assert sonnet.release_date == "2025-05-22"
    assert sonnet.reasoning is True
    assert sonnet.tool_call is True
    assert sonnet.attachment is True
    assert sonnet.context_limit == 200_000
    assert sonnet.output_limit == 64_000
    assert sonnet.input_modalities == (Modality.TEXT, Modality.IMAGE, Modality.PDF)
    assert sonnet.output_modalities == (Modality.TEXT,)
    assert sonnet.pricing == Cost(input=3.0, output=15.0, cache_read=0.3, cache_write=3.75)


def test_tiered_pricing_uses_first_tier(payload: object) -> None:
    gemini = parse_catalog(payload).models[1]

    assert gemini.release_date is None
    assert gemini.pricing == Cost(
        input=1.25,
        output=10.0,
        context_over_200k=CostTier(input=2.5, output=15.0),
    )


def test_null_tags_and_missing_pricing(payload: object) -> None:
    embedding = parse_catalog(payload).models[2]

    assert embedding.reasoning is False
    assert embedding.attachment is False
    assert embedding.pricing is None
    assert embedding.input_modalities == (Modality.TEXT,)


def test_invalid_price_string_fails_validation() -> None:
    payload = {
        "data": [
            {
                "id": "acme/widget",
                "name": "Widget",
                "created": 0,
                "context_window": 1,
                "max_tokens": 1,
                "type": "language",
                "pricing": {"input": "cheap", "output": "0.1"},
            }
        ]
    }

    with pytest.raises(pydantic.ValidationError):
        parse_catalog(payload)


@pytest.mark.parametrize("price", ["-0.000001", "NaN", "Infinity"])
def test_negative_or_non_finite_price_fails_validation(price: str) -> None:
    payload = {
        "data": [
            {
                "id": "acme/widget",
                "name": "Widget",
                "created": 0,
                "context_window": 1,
                "max_tokens": 1,
                "type": "language",
                "pricing": {"input": "0.000001", "output": price},
            }
        ]
    }

    with pytest.raises(pydantic.ValidationError):
        parse_catalog(payload)
