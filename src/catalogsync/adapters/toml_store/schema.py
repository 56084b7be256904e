"""Pydantic models for model records stored as TOML documents."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    field_validator,
)

from catalogsync.domain.model import InterleavedFieldName, Modality, ModelStatus, is_date_string


class StoredBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class StoredCostTier(StoredBaseModel):
    input: NonNegativeFloat
    output: NonNegativeFloat
    reasoning: NonNegativeFloat | None = None
    cache_read: NonNegativeFloat | None = None
    cache_write: NonNegativeFloat | None = None
    input_audio: NonNegativeFloat | None = None
    output_audio: NonNegativeFloat | None = None


class StoredCost(StoredCostTier):
    context_over_200k: StoredCostTier | None = None


class StoredLimit(StoredBaseModel):
    context: NonNegativeInt | None = None
    input: NonNegativeInt | None = None
    output: NonNegativeInt | None = None


class StoredModalities(StoredBaseModel):
    input: list[Modality] | None = None
    output: list[Modality] | None = None


class StoredInterleaved(StoredBaseModel):
    field: InterleavedFieldName


class StoredModelDocument(StoredBaseModel):
    name: str | None = None
    family: str | None = None
    attachment: bool | None = None
    reasoning: bool | None = None
    tool_call: bool | None = None
    structured_output: bool | None = None
    temperature: bool | None = None
    knowledge: str | None = None
    release_date: str | None = None
    last_updated: str | None = None
    open_weights: bool | None = None
    status: ModelStatus | None = None
    interleaved: Literal[True] | StoredInterleaved | None = None
    cost: StoredCost | None = None
    limit: StoredLimit = Field(default_factory=StoredLimit)
    modalities: StoredModalities = Field(default_factory=StoredModalities)

    @field_validator("knowledge", "release_date", "last_updated", mode="before")
    @classmethod
    def _coerce_date(cls, value: object) -> object:
        # TOML allows bare local dates; tomllib returns them as ``date`` objects.
        if isinstance(value, date):
            return value.isoformat()
        return value

    @field_validator("knowledge", "release_date", "last_updated")
    @classmethod
    def _check_date_format(cls, value: str | None) -> str | None:
        if value is not None and not is_date_string(value):
            raise ValueError(f"expected YYYY-MM or YYYY-MM-DD, got {value!r}")
        return value
