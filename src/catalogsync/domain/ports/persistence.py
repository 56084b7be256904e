"""Ports for persisting catalog records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from catalogsync.domain.model import CatalogRecord, ExistingRecord, ModelId


class PersistedRecordParseError(RuntimeError):
    """Raised when a stored record exists but cannot be read back."""

    def __init__(self, message: str, *, model_id: ModelId, path: Path | None = None) -> None:
        super().__init__(message)
        self.model_id = model_id
        self.path = path


@runtime_checkable
class CatalogStore(Protocol):
    """Persistence contract for one provider's catalog records."""

    @property
    def provider_id(self) -> str: ...

    def list_ids(self) -> set[ModelId]: ...

    def load(self, model_id: ModelId) -> ExistingRecord | None:
        """Return the stored record, ``None`` when absent.

        Raises :class:`PersistedRecordParseError` when the record exists but is unreadable.
        """
        ...

    def save(self, record: CatalogRecord) -> None: ...

    def delete(self, model_id: ModelId) -> None: ...


__all__ = ["CatalogStore", "PersistedRecordParseError"]
