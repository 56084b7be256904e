"""Jiekou.AI catalog translation from a captured payload."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pydantic
import pytest

from catalogsync.adapters.jiekou import is_open_weights, parse_catalog
from catalogsync.domain.model import Cost, Modality

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def payload(load_payload: Callable[[str], object]) -> object:
    return load_payload("jiekou_models.json")


def test_open_weights_heuristic() -> None:
    assert is_open_weights("deepseek/deepseek-r1-0528")
    assert is_open_weights("zai-org/GLM-4.6")
    assert not is_open_weights("claude-sonnet-4-5-20250929")


def test_nested_id_and_features(payload: object) -> None:
    deepseek = parse_catalog(payload).models[0]

    assert deepseek.model_id == "deepseek/deepseek-r1-0528"
    assert deepseek.name == "deepseek/deepseek-r1-0528"
    assert deepseek.release_date is None
    assert deepseek.reasoning is True
    assert deepseek.tool_call is True
    assert deepseek.structured_output is True
    assert deepseek.temperature is True
    assert deepseek.open_weights is True
    assert deepseek.attachment is False
    assert deepseek.context_limit == 163_840
    assert deepseek.output_limit == 32_768


def test_prices_are_ten_thousandths_of_a_dollar(payload: object) -> None:
    deepseek, gpt, _ = parse_catalog(payload).models

    assert deepseek.pricing == Cost(input=0.7, output=2.5)
    assert gpt.pricing == Cost(input=1.25, output=10.0)


def test_image_input_means_attachment(payload: object) -> None:
    gpt = parse_catalog(payload).models[1]

    assert gpt.attachment is True
    assert gpt.structured_output is False
    assert gpt.input_modalities == (Modality.TEXT, Modality.IMAGE)


def test_missing_features_and_modalities(payload: object) -> None:
    claude = parse_catalog(payload).models[2]

    assert claude.reasoning is False
    assert claude.tool_call is False
    assert claude.open_weights is False
    assert claude.input_modalities == (Modality.TEXT,)
    assert claude.output_modalities == (Modality.TEXT,)


def test_negative_price_fails_validation() -> None:
    payload = {
        "data": [
            {
                "id": "acme/widget",
                "created": 0,
                "object": "model",
                "input_token_price_per_m": -1,
                "output_token_price_per_m": 10,
                "context_size": 1,
                "max_output_tokens": 1,
            }
        ]
    }

    with pytest.raises(pydantic.ValidationError):
        parse_catalog(payload)
