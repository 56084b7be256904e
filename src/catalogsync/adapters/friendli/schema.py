"""Pydantic models describing the FriendliAI serverless model catalog."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from catalogsync.adapters.pricing import Price


class FriendliBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Functionality(FriendliBaseModel):
    tool_call: bool
    parallel_tool_call: bool
    structured_output: bool


class FriendliPricing(FriendliBaseModel):
    """``input``/``output`` are USD per million tokens when ``unit_type`` is TOKEN."""

    input: Price
    output: Price
    response_time: float
    unit_type: Literal["TOKEN", "SECOND"]


class FriendliModel(FriendliBaseModel):
    id: str
    name: str
    max_completion_tokens: int
    context_length: int
    functionality: Functionality
    pricing: FriendliPricing
    hugging_face_url: str | None = None
    description: str | None = None
    license: str | None = None
    policy: str | None = None
    created: int


class FriendliResponse(FriendliBaseModel):
    data: list[FriendliModel]
