"""Async HTTP client for catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import QueryParamTypes

    from catalogsync.config.http import HttpSourceConfig


class RequestOptions(TypedDict, total=False):
    params: QueryParamTypes | None
    headers: dict[str, str] | None


class AsyncClientOptions(TypedDict, total=False):
    timeout: float
    headers: dict[str, str]
    transport: httpx.AsyncBaseTransport


class CatalogHttpClient:
    """Single-shot JSON GET against one configured catalog endpoint."""

    def __init__(
        self,
        config: HttpSourceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "headers": config.headers(),
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> CatalogHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return await self._client.get(url, **kwargs)

    async def get_json(self, **kwargs: Unpack[RequestOptions]) -> object:
        """GET the configured URL; raises ``httpx.HTTPStatusError`` on non-2xx."""

        response = await self.get(self.config.url, **kwargs)
        response.raise_for_status()
        return response.json()
