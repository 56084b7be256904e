"""Pydantic models describing the Venice AI model catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from catalogsync.adapters.pricing import Price


class VeniceBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Capabilities(VeniceBaseModel):
    optimized_for_code: bool | None = Field(default=None, alias="optimizedForCode")
    quantization: str | None = None
    supports_audio_input: bool | None = Field(default=None, alias="supportsAudioInput")
    supports_function_calling: bool | None = Field(default=None, alias="supportsFunctionCalling")
    supports_log_probs: bool | None = Field(default=None, alias="supportsLogProbs")
    supports_reasoning: bool | None = Field(default=None, alias="supportsReasoning")
    supports_response_schema: bool | None = Field(default=None, alias="supportsResponseSchema")
    supports_video_input: bool | None = Field(default=None, alias="supportsVideoInput")
    supports_vision: bool | None = Field(default=None, alias="supportsVision")
    supports_web_search: bool | None = Field(default=None, alias="supportsWebSearch")


class PriceAmount(VeniceBaseModel):
    usd: Price
    diem: float | None = None


class ExtendedPricing(VeniceBaseModel):
    context_token_threshold: int
    input: PriceAmount
    output: PriceAmount
    cache_input: PriceAmount | None = None
    cache_write: PriceAmount | None = None


class VenicePricing(VeniceBaseModel):
    """USD per million tokens."""

    input: PriceAmount
    output: PriceAmount
    cache_input: PriceAmount | None = None
    cache_write: PriceAmount | None = None
    extended: ExtendedPricing | None = None


class ModelSpec(VeniceBaseModel):
    pricing: VenicePricing | None = None
    available_context_tokens: int = Field(alias="availableContextTokens")
    capabilities: Capabilities
    name: str
    model_source: str | None = Field(default=None, alias="modelSource")
    offline: bool | None = None
    privacy: str | None = None
    traits: list[str] | None = None


class VeniceModel(VeniceBaseModel):
    created: int
    id: str
    model_spec: ModelSpec
    object: str
    owned_by: str
    type: str


class VeniceResponse(VeniceBaseModel):
    data: list[VeniceModel]
    object: str
    type: str
