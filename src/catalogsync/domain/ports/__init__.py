"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import (
    CatalogFetcher,
    CatalogFetchError,
    FetchFailure,
    FetchFailureKind,
    FetchResult,
    FetchSuccess,
    TransportError,
    ValidationError,
)
from .persistence import CatalogStore, PersistedRecordParseError

__all__ = [
    "CatalogFetchError",
    "CatalogFetcher",
    "CatalogStore",
    "FetchFailure",
    "FetchFailureKind",
    "FetchResult",
    "FetchSuccess",
    "PersistedRecordParseError",
    "TransportError",
    "ValidationError",
]
