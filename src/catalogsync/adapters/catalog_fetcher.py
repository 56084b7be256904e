"""Generic fetcher: one GET, one schema validation, one translation pass."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
import pydantic

from catalogsync.domain.ports.fetching import (
    FetchFailure,
    FetchFailureKind,
    FetchResult,
    FetchSuccess,
)

from .http_client import CatalogHttpClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalogsync.config.http import HttpSourceConfig
    from catalogsync.domain.model import ModelId, SourceModel

log = getLogger(__name__)


@dataclass(slots=True)
class TranslatedCatalog:
    models: list[SourceModel] = field(default_factory=list)
    unsupported_ids: list[ModelId] = field(default_factory=list)


type CatalogParser = Callable[[object], TranslatedCatalog]
"""Validate a raw payload and translate it; raises ``pydantic.ValidationError``."""


def _default_client_factory(config: HttpSourceConfig) -> CatalogHttpClient:
    return CatalogHttpClient(config)


@dataclass(slots=True)
class HttpCatalogFetcher:
    config: HttpSourceConfig
    parse: CatalogParser
    client_factory: Callable[[HttpSourceConfig], CatalogHttpClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> FetchResult:
        provider_id = self.config.name
        try:
            payload = asyncio.run(self._fetch_payload_async())
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            return FetchFailure(
                kind=FetchFailureKind.TRANSPORT,
                message=f"{provider_id} catalog request failed with HTTP {status}",
                provider_id=provider_id,
                payload=exc.response.text,
                status_code=status,
            )
        except httpx.HTTPError as exc:
            return FetchFailure(
                kind=FetchFailureKind.TRANSPORT,
                message=f"{provider_id} catalog request failed: {exc!r}",
                provider_id=provider_id,
            )
        except json.JSONDecodeError as exc:
            return FetchFailure(
                kind=FetchFailureKind.VALIDATION,
                message=f"{provider_id} catalog response is not JSON: {exc}",
                provider_id=provider_id,
                payload=exc.doc,
            )

        try:
            catalog = self.parse(payload)
        except pydantic.ValidationError as exc:
            return FetchFailure(
                kind=FetchFailureKind.VALIDATION,
                message=f"Invalid {provider_id} catalog response: {exc}",
                provider_id=provider_id,
                payload=payload,
            )

        log.info(
            "Fetched %d %s models (%d unsupported)",
            len(catalog.models),
            provider_id,
            len(catalog.unsupported_ids),
        )
        return FetchSuccess(
            models=tuple(catalog.models),
            unsupported_ids=tuple(catalog.unsupported_ids),
        )

    async def _fetch_payload_async(self) -> object:
        async with self.client_factory(self.config) as client:
            return await client.get_json()
