"""Pydantic models describing the Helicone public model registry."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from catalogsync.adapters.pricing import Price


class HeliconeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class HeliconePricing(HeliconeBaseModel):
    """USD per million tokens."""

    prompt: Price | None = None
    completion: Price | None = None
    cache_read: Price | None = Field(default=None, alias="cacheRead")
    cache_write: Price | None = Field(default=None, alias="cacheWrite")
    reasoning: Price | None = None


class HeliconeEndpoint(HeliconeBaseModel):
    provider: str
    provider_slug: str | None = Field(default=None, alias="providerSlug")
    supports_ptb: bool | None = Field(default=None, alias="supportsPtb")
    pricing: HeliconePricing | None = None


class HeliconeModel(HeliconeBaseModel):
    id: str
    name: str
    author: str | None = None
    context_length: int | None = Field(default=None, alias="contextLength")
    max_output: int | None = Field(default=None, alias="maxOutput")
    training_date: str | None = Field(default=None, alias="trainingDate")
    description: str | None = None
    input_modalities: list[str] | None = Field(default=None, alias="inputModalities")
    output_modalities: list[str] | None = Field(default=None, alias="outputModalities")
    supported_parameters: list[str] | None = Field(default=None, alias="supportedParameters")
    endpoints: list[HeliconeEndpoint] | None = None


class HeliconeData(HeliconeBaseModel):
    models: list[HeliconeModel]
    total: int | None = None


class HeliconeResponse(HeliconeBaseModel):
    data: HeliconeData
