"""Ports for fetching provider catalogs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal, NoReturn, Protocol, runtime_checkable

if TYPE_CHECKING:
    from catalogsync.domain.model import ModelId, SourceModel


class FetchFailureKind(StrEnum):
    TRANSPORT = "transport"
    VALIDATION = "validation"


class CatalogFetchError(RuntimeError):
    """Raised when a provider catalog cannot be turned into source models."""

    def __init__(self, message: str, *, provider_id: str | None = None) -> None:
        super().__init__(message)
        self.provider_id = provider_id


class TransportError(CatalogFetchError):
    """The catalog endpoint could not be reached or answered with an error status."""

    def __init__(
        self,
        message: str,
        *,
        provider_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, provider_id=provider_id)
        self.status_code = status_code


class ValidationError(CatalogFetchError):
    """The catalog payload did not match the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        provider_id: str | None = None,
        payload: object = None,
    ) -> None:
        super().__init__(message, provider_id=provider_id)
        self.payload = payload


@dataclass(slots=True)
class FetchSuccess:
    """Validated catalog entries, in payload order."""

    models: tuple[SourceModel, ...]
    unsupported_ids: tuple[ModelId, ...] = ()
    ok: Literal[True] = True


@dataclass(slots=True)
class FetchFailure:
    """Expected fetch failure; nothing downstream may run."""

    kind: FetchFailureKind
    message: str
    provider_id: str | None = None
    payload: object = None
    status_code: int | None = None
    ok: Literal[False] = False

    def raise_for_failure(self) -> NoReturn:
        if self.kind is FetchFailureKind.TRANSPORT:
            raise TransportError(
                self.message,
                provider_id=self.provider_id,
                status_code=self.status_code,
            )
        raise ValidationError(self.message, provider_id=self.provider_id, payload=self.payload)


type FetchResult = FetchSuccess | FetchFailure


@runtime_checkable
class CatalogFetcher(Protocol):
    """Callable port returning one provider's full catalog."""

    def __call__(self) -> FetchResult: ...


__all__ = [
    "CatalogFetchError",
    "CatalogFetcher",
    "FetchFailure",
    "FetchFailureKind",
    "FetchResult",
    "FetchSuccess",
    "TransportError",
    "ValidationError",
]
