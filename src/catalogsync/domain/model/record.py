"""Catalog records: the persisted shape and its partially-known counterpart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .enums import InterleavedFieldName, Modality, ModelStatus
from .primitives import DateString, ModelId

type ModalityList = tuple[Modality, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class CostTier:
    """Prices in USD per million tokens."""

    input: float
    output: float
    reasoning: float | None = None
    cache_read: float | None = None
    cache_write: float | None = None
    input_audio: float | None = None
    output_audio: float | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Cost(CostTier):
    context_over_200k: CostTier | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Limit:
    context: int
    output: int
    input: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Modalities:
    input: ModalityList = (Modality.TEXT,)
    output: ModalityList = (Modality.TEXT,)


@dataclass(frozen=True, slots=True)
class InterleavedField:
    field: InterleavedFieldName


type Interleaved = Literal[True] | InterleavedField


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogRecord:
    """Authoritative metadata for one model served by one provider."""

    model_id: ModelId
    name: str
    attachment: bool
    reasoning: bool
    tool_call: bool
    release_date: DateString
    last_updated: DateString
    open_weights: bool
    limit: Limit
    modalities: Modalities = field(default_factory=Modalities)
    family: str | None = None
    structured_output: bool | None = None
    temperature: bool | None = None
    knowledge: DateString | None = None
    interleaved: Interleaved | None = None
    status: ModelStatus | None = None
    cost: Cost | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExistingLimit:
    context: int | None = None
    input: int | None = None
    output: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExistingModalities:
    input: ModalityList | None = None
    output: ModalityList | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExistingRecord:
    """A previously persisted record as read back from the store.

    Hand-edited files may omit anything, so every field is optional. Use
    :meth:`as_complete` when a fully populated :class:`CatalogRecord` is required.
    """

    model_id: ModelId
    name: str | None = None
    family: str | None = None
    attachment: bool | None = None
    reasoning: bool | None = None
    tool_call: bool | None = None
    structured_output: bool | None = None
    temperature: bool | None = None
    knowledge: DateString | None = None
    release_date: DateString | None = None
    last_updated: DateString | None = None
    open_weights: bool | None = None
    interleaved: Interleaved | None = None
    status: ModelStatus | None = None
    cost: Cost | None = None
    limit: ExistingLimit = field(default_factory=ExistingLimit)
    modalities: ExistingModalities = field(default_factory=ExistingModalities)

    @classmethod
    def from_record(cls, record: CatalogRecord) -> ExistingRecord:
        return cls(
            model_id=record.model_id,
            name=record.name,
            family=record.family,
            attachment=record.attachment,
            reasoning=record.reasoning,
            tool_call=record.tool_call,
            structured_output=record.structured_output,
            temperature=record.temperature,
            knowledge=record.knowledge,
            release_date=record.release_date,
            last_updated=record.last_updated,
            open_weights=record.open_weights,
            interleaved=record.interleaved,
            status=record.status,
            cost=record.cost,
            limit=ExistingLimit(
                context=record.limit.context,
                input=record.limit.input,
                output=record.limit.output,
            ),
            modalities=ExistingModalities(
                input=record.modalities.input,
                output=record.modalities.output,
            ),
        )

    def as_complete(self) -> CatalogRecord | None:
        """Return a full record, or ``None`` when a required field is missing."""

        if (
            self.name is None
            or self.attachment is None
            or self.reasoning is None
            or self.tool_call is None
            or self.release_date is None
            or self.last_updated is None
            or self.open_weights is None
            or self.limit.context is None
            or self.limit.output is None
            or self.modalities.input is None
            or self.modalities.output is None
        ):
            return None
        return CatalogRecord(
            model_id=self.model_id,
            name=self.name,
            family=self.family,
            attachment=self.attachment,
            reasoning=self.reasoning,
            tool_call=self.tool_call,
            structured_output=self.structured_output or None,
            temperature=self.temperature,
            knowledge=self.knowledge,
            release_date=self.release_date,
            last_updated=self.last_updated,
            open_weights=self.open_weights,
            interleaved=self.interleaved,
            status=self.status,
            cost=self.cost,
            limit=Limit(
                context=self.limit.context,
                input=self.limit.input,
                output=self.limit.output,
            ),
            modalities=Modalities(input=self.modalities.input, output=self.modalities.output),
        )
