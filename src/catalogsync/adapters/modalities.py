"""Modality parsing shared by provider translators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.model import Modality

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogsync.domain.model import ModalityList


def sanitize_modalities(values: Iterable[str] | None) -> ModalityList:
    """Keep the modalities we know, case-insensitively; default to text only."""

    if values is None:
        return (Modality.TEXT,)
    known = {modality.value for modality in Modality}
    modalities = tuple(Modality(value.lower()) for value in values if value.lower() in known)
    return modalities or (Modality.TEXT,)
