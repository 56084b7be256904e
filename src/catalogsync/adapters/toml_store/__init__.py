"""TOML file store for catalog records."""

from __future__ import annotations

from .schema import StoredModelDocument
from .serializer import serialize_record
from .store import MODEL_FILE_SUFFIX, TomlCatalogStore
from .translator import to_existing_record

__all__ = [
    "MODEL_FILE_SUFFIX",
    "StoredModelDocument",
    "TomlCatalogStore",
    "serialize_record",
    "to_existing_record",
]
