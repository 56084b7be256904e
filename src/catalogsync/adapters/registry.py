"""Wire provider profiles to their catalog parsers."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from catalogsync.config.errors import UnknownProviderError

from . import cloudflare, friendli, helicone, jiekou, venice, vercel
from .catalog_fetcher import HttpCatalogFetcher

if TYPE_CHECKING:
    from collections.abc import Mapping

    from catalogsync.config.providers import ProviderProfile

    from .catalog_fetcher import CatalogParser

CATALOG_PARSERS: Final[Mapping[str, CatalogParser]] = MappingProxyType(
    {
        "vercel": vercel.parse_catalog,
        "venice": venice.parse_catalog,
        "friendli": friendli.parse_catalog,
        "helicone": helicone.parse_catalog,
        "cloudflare-ai-gateway": cloudflare.parse_catalog,
        "jiekou": jiekou.parse_catalog,
    }
)


def build_catalog_fetcher(profile: ProviderProfile) -> HttpCatalogFetcher:
    """Resolve credentials from the environment and return a ready fetcher."""

    parser = CATALOG_PARSERS.get(profile.provider_id)
    if parser is None:
        raise UnknownProviderError(profile.provider_id, known=tuple(sorted(CATALOG_PARSERS)))
    return HttpCatalogFetcher(config=profile.http_config(), parse=parser)
