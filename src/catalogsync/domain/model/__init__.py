"""Public domain model surface."""

from __future__ import annotations

from catalogsync.domain.model.enums import (
    InterleavedFieldName,
    Modality,
    ModelStatus,
    OrphanPolicy,
    RecordOutcome,
)
from catalogsync.domain.model.families import KNOWN_FAMILIES
from catalogsync.domain.model.primitives import (
    DateString,
    ModelId,
    ProviderId,
    date_from_timestamp,
    format_date,
    is_date_string,
)
from catalogsync.domain.model.record import (
    CatalogRecord,
    Cost,
    CostTier,
    ExistingLimit,
    ExistingModalities,
    ExistingRecord,
    Interleaved,
    InterleavedField,
    Limit,
    Modalities,
    ModalityList,
)
from catalogsync.domain.model.source import SourceModel, SourcePricing

__all__ = [
    "KNOWN_FAMILIES",
    "CatalogRecord",
    "Cost",
    "CostTier",
    "DateString",
    "ExistingLimit",
    "ExistingModalities",
    "ExistingRecord",
    "Interleaved",
    "InterleavedField",
    "InterleavedFieldName",
    "Limit",
    "Modalities",
    "ModalityList",
    "Modality",
    "ModelId",
    "ModelStatus",
    "OrphanPolicy",
    "ProviderId",
    "RecordOutcome",
    "SourceModel",
    "SourcePricing",
    "date_from_timestamp",
    "format_date",
    "is_date_string",
]
