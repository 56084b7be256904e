from __future__ import annotations

import pytest

from catalogsync.adapters.catalog_fetcher import HttpCatalogFetcher
from catalogsync.adapters.registry import CATALOG_PARSERS, build_catalog_fetcher
from catalogsync.config import PROVIDER_PROFILES, MissingConfigurationError, get_provider_profile


def test_every_profile_has_a_parser() -> None:
    assert set(CATALOG_PARSERS) == set(PROVIDER_PROFILES)


def test_build_fetcher_for_public_catalog() -> None:
    fetcher = build_catalog_fetcher(get_provider_profile("helicone"))

    assert isinstance(fetcher, HttpCatalogFetcher)
    assert fetcher.config.name == "helicone"
    assert fetcher.parse is CATALOG_PARSERS["helicone"]


def test_build_fetcher_surfaces_missing_credentials() -> None:
    with pytest.raises(MissingConfigurationError):
        build_catalog_fetcher(get_provider_profile("cloudflare-ai-gateway"))
