"""Field provenance rules: where each merged field takes its value from."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from catalogsync.domain.model import Modality

if TYPE_CHECKING:
    from collections.abc import Mapping


class FieldProvenance(StrEnum):
    ALWAYS_FROM_SOURCE = "always_from_source"
    """Source value, else the computed default. Existing values are overwritten."""

    PRESERVE_IF_PRESENT = "preserve_if_present"
    """Existing value when present, else source, else default."""

    SOURCE_WITH_EXISTING_FALLBACK = "source_with_existing_fallback"
    """Source value, else existing, else default."""

    INFERRED_WITH_OVERRIDE = "inferred_with_override"
    """A manually pinned existing value, else the inferred value."""

    COMPUTED_DEFAULT = "computed_default"
    """Always the computed default (e.g. the run date)."""


DEFAULT_PROVENANCE: Final[Mapping[str, FieldProvenance]] = MappingProxyType(
    {
        "name": FieldProvenance.SOURCE_WITH_EXISTING_FALLBACK,
        "family": FieldProvenance.INFERRED_WITH_OVERRIDE,
        "attachment": FieldProvenance.ALWAYS_FROM_SOURCE,
        "reasoning": FieldProvenance.ALWAYS_FROM_SOURCE,
        "tool_call": FieldProvenance.ALWAYS_FROM_SOURCE,
        "structured_output": FieldProvenance.ALWAYS_FROM_SOURCE,
        "temperature": FieldProvenance.SOURCE_WITH_EXISTING_FALLBACK,
        "open_weights": FieldProvenance.SOURCE_WITH_EXISTING_FALLBACK,
        "knowledge": FieldProvenance.PRESERVE_IF_PRESENT,
        "interleaved": FieldProvenance.PRESERVE_IF_PRESENT,
        "status": FieldProvenance.PRESERVE_IF_PRESENT,
        "cost": FieldProvenance.ALWAYS_FROM_SOURCE,
        "modalities": FieldProvenance.ALWAYS_FROM_SOURCE,
        "release_date": FieldProvenance.SOURCE_WITH_EXISTING_FALLBACK,
        "last_updated": FieldProvenance.COMPUTED_DEFAULT,
    }
)


def resolve_value[T](
    rule: FieldProvenance,
    *,
    source: T | None,
    existing: T | None,
    default: T | None,
) -> T | None:
    if rule is FieldProvenance.COMPUTED_DEFAULT:
        return default
    candidates: tuple[T | None, ...]
    if rule is FieldProvenance.ALWAYS_FROM_SOURCE:
        candidates = (source, default)
    elif rule is FieldProvenance.SOURCE_WITH_EXISTING_FALLBACK:
        candidates = (source, existing, default)
    else:
        candidates = (existing, source, default)
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconcilePolicy:
    """Per-provider knobs for the reconciler.

    ``provenance`` overrides the defaults field by field. Limits fall back to
    ``default_context_limit``/``default_output_limit`` when neither the source nor
    the existing record has a positive value.
    """

    provenance: Mapping[str, FieldProvenance] = field(
        default_factory=lambda: MappingProxyType({})
    )
    default_context_limit: int = 0
    default_output_limit: int = 0
    sticky_input_modalities: frozenset[Modality] = frozenset()

    def rule_for(self, field_name: str) -> FieldProvenance:
        rule = self.provenance.get(field_name)
        if rule is not None:
            return rule
        return DEFAULT_PROVENANCE[field_name]

    def with_rules(self, **rules: FieldProvenance) -> ReconcilePolicy:
        unknown = sorted(set(rules) - set(DEFAULT_PROVENANCE))
        if unknown:
            raise ValueError(f"Unknown provenance fields: {', '.join(unknown)}")
        merged = {**self.provenance, **rules}
        return replace(self, provenance=MappingProxyType(merged))
