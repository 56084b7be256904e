"""Human-readable field diffs between an existing and a merged record.

The diff is advisory: it feeds logs and dry-run previews. Whether a record is
rewritten is decided by :func:`same_content`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from catalogsync.domain.model import InterleavedField

if TYPE_CHECKING:
    from catalogsync.domain.model import CatalogRecord, ExistingRecord

PRICE_EPSILON: Final[float] = 0.001

_COST_FIELDS: Final[tuple[str, ...]] = (
    "input",
    "output",
    "reasoning",
    "cache_read",
    "cache_write",
    "input_audio",
    "output_audio",
)

COMPARED_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "family",
    "attachment",
    "reasoning",
    "tool_call",
    "structured_output",
    "temperature",
    "open_weights",
    "knowledge",
    "release_date",
    "status",
    "interleaved",
    *(f"cost.{name}" for name in _COST_FIELDS),
    *(f"cost.context_over_200k.{name}" for name in _COST_FIELDS),
    "limit.context",
    "limit.input",
    "limit.output",
    "modalities.input",
    "modalities.output",
)
"""Fields compared between records, in report order. ``last_updated`` is excluded."""

_ZERO_TOLERANT_LIMITS: Final[frozenset[str]] = frozenset({"limit.context", "limit.output"})


@dataclass(frozen=True, slots=True)
class Change:
    field: str
    old: object
    new: object

    def __str__(self) -> str:
        return f"{self.field}: {format_value(self.old)} -> {format_value(self.new)}"


def field_value(record: CatalogRecord | ExistingRecord, path: str) -> object:
    value: object = record
    for part in path.split("."):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


def format_value(value: object) -> str:
    if value is None:
        return "(none)"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, int):
        return f"{value:_}"
    if isinstance(value, float):
        return f"{value:_}" if value.is_integer() else repr(value)
    if isinstance(value, InterleavedField):
        return f"{{field = {value.field.value}}}"
    if isinstance(value, tuple | list):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def _is_material(path: str, old: object, new: object) -> bool:
    if path.startswith("cost."):
        if old == 0 and new is None:
            return False
        if isinstance(old, int | float) and isinstance(new, int | float):
            return abs(old - new) > PRICE_EPSILON
        return old != new
    if path in _ZERO_TOLERANT_LIMITS and (old == 0 or new == 0 or new is None):
        return False
    return old != new


def diff(existing: ExistingRecord | None, merged: CatalogRecord) -> list[Change]:
    """Ordered list of material changes; empty when there is no existing record."""

    if existing is None:
        return []
    changes: list[Change] = []
    for path in COMPARED_FIELDS:
        old = field_value(existing, path)
        new = field_value(merged, path)
        if _is_material(path, old, new):
            changes.append(Change(path, old, new))
    return changes


def same_content(existing: ExistingRecord | None, merged: CatalogRecord) -> bool:
    """True when rewriting ``merged`` would change nothing but ``last_updated``."""

    if existing is None:
        return False
    return all(
        field_value(existing, path) == field_value(merged, path) for path in COMPARED_FIELDS
    )
