"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Modality(StrEnum):
    TEXT = "text"
    AUDIO = "audio"
    IMAGE = "image"
    VIDEO = "video"
    PDF = "pdf"


class ModelStatus(StrEnum):
    ALPHA = "alpha"
    BETA = "beta"
    DEPRECATED = "deprecated"


class InterleavedFieldName(StrEnum):
    """Response field carrying interleaved reasoning output."""

    REASONING_CONTENT = "reasoning_content"
    REASONING_DETAILS = "reasoning_details"


class OrphanPolicy(StrEnum):
    WARN_ONLY = "warn_only"
    DELETE_IMMEDIATELY = "delete_immediately"


class RecordOutcome(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
