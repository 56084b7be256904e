"""Find persisted records without a counterpart in the current source catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogsync.domain.model import ModelId


def find_orphans(
    existing_ids: Iterable[ModelId],
    processed_ids: Iterable[ModelId],
) -> tuple[ModelId, ...]:
    """Ids present on disk but not processed this run, sorted for stable reporting."""

    return tuple(sorted(set(existing_ids) - set(processed_ids)))
