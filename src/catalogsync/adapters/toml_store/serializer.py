"""Deterministic TOML rendering of catalog records.

Field and section order is fixed so that regenerating an unchanged record yields
a byte-identical file and diffs in review stay minimal.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from catalogsync.domain.model import CatalogRecord, CostTier

_COST_KEYS: Final[tuple[str, ...]] = (
    "input",
    "output",
    "reasoning",
    "cache_read",
    "cache_write",
    "input_audio",
    "output_audio",
)


def format_number(value: float) -> str:
    """Render a number; integers from 1000 up get ``_`` digit separators."""

    if isinstance(value, float):
        if not value.is_integer():
            return repr(value)
        value = int(value)
    if abs(value) >= 1000:
        return f"{value:_}"
    return str(value)


def format_string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic-string escapes; TOML also
    # forbids a raw DEL, which JSON leaves alone.
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    if isinstance(value, str):
        return format_string(value)
    if isinstance(value, tuple | list):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    raise TypeError(f"Unsupported TOML value: {value!r}")


def _cost_lines(tier: CostTier) -> list[str]:
    lines: list[str] = []
    for key in _COST_KEYS:
        value = getattr(tier, key)
        if value is not None:
            lines.append(f"{key} = {format_number(value)}")
    return lines


def serialize_record(record: CatalogRecord) -> str:
    scalars: list[tuple[str, object | None]] = [
        ("name", record.name),
        ("family", record.family),
        ("attachment", record.attachment),
        ("reasoning", record.reasoning),
        ("tool_call", record.tool_call),
        ("structured_output", True if record.structured_output else None),
        ("temperature", record.temperature),
        ("knowledge", record.knowledge),
        ("release_date", record.release_date),
        ("last_updated", record.last_updated),
        ("open_weights", record.open_weights),
        ("status", record.status.value if record.status is not None else None),
    ]
    lines = [f"{key} = {format_value(value)}" for key, value in scalars if value is not None]

    sections: list[list[str]] = []
    if record.interleaved is True:
        sections.append(["interleaved = true"])
    elif record.interleaved is not None:
        sections.append(
            ["[interleaved]", f"field = {format_string(record.interleaved.field.value)}"]
        )

    if record.cost is not None:
        sections.append(["[cost]", *_cost_lines(record.cost)])
        extended = record.cost.context_over_200k
        if extended is not None:
            sections.append(["[cost.context_over_200k]", *_cost_lines(extended)])

    limit_lines = ["[limit]", f"context = {format_number(record.limit.context)}"]
    if record.limit.input is not None:
        limit_lines.append(f"input = {format_number(record.limit.input)}")
    limit_lines.append(f"output = {format_number(record.limit.output)}")
    sections.append(limit_lines)

    sections.append(
        [
            "[modalities]",
            f"input = {format_value([str(m) for m in record.modalities.input])}",
            f"output = {format_value([str(m) for m in record.modalities.output])}",
        ]
    )

    blocks = ["\n".join(lines), *("\n".join(section) for section in sections)]
    return "\n\n".join(blocks) + "\n"
