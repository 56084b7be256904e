from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

import httpx
import pytest

from catalogsync.adapters.catalog_fetcher import HttpCatalogFetcher
from catalogsync.adapters.cloudflare import parse_catalog as parse_cloudflare
from catalogsync.adapters.http_client import CatalogHttpClient
from catalogsync.adapters.jiekou import parse_catalog as parse_jiekou
from catalogsync.adapters.toml_store import serialize_record
from catalogsync.adapters.vercel import parse_catalog as parse_vercel
from catalogsync.app import sync_provider
from catalogsync.config.providers import get_provider_profile
from catalogsync.domain.model import Limit
from catalogsync.domain.ports.fetching import FetchSuccess, ValidationError
from tests.helpers.catalog import StaticFetcher, make_record, make_source

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date
    from pathlib import Path

    from catalogsync.config.http import HttpSourceConfig


def _write(root: Path, provider: str, model_id: str, text: str) -> Path:
    path = root / provider / "models" / f"{model_id}.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_sync_writes_toml_files(tmp_path: Path, run_date: date) -> None:
    fetcher = StaticFetcher([make_source("zai-org/glm-4.6", name="GLM 4.6")])

    report = sync_provider(
        "friendli", providers_root=tmp_path, fetcher=fetcher, run_date=run_date
    )

    path = tmp_path / "friendli" / "models" / "zai-org" / "glm-4.6.toml"
    document = tomllib.loads(path.read_text(encoding="utf-8"))
    assert report.created == 1
    assert document["name"] == "GLM 4.6"
    assert document["last_updated"] == "2025-02-01"
    assert document["limit"] == {"context": 128_000, "output": 8_000}


def test_sync_twice_leaves_files_untouched(tmp_path: Path, run_date: date) -> None:
    fetcher = StaticFetcher([make_source("acme/widget-1")])
    sync_provider("friendli", providers_root=tmp_path, fetcher=fetcher, run_date=run_date)
    path = tmp_path / "friendli" / "models" / "acme" / "widget-1.toml"
    first = path.read_text(encoding="utf-8")

    report = sync_provider(
        "friendli", providers_root=tmp_path, fetcher=fetcher, run_date=run_date.replace(day=9)
    )

    assert report.unchanged == 1
    assert path.read_text(encoding="utf-8") == first


def test_dry_run_touches_nothing(tmp_path: Path, run_date: date) -> None:
    stale = _write(tmp_path, "helicone", "old-model", serialize_record(make_record("old-model")))

    report = sync_provider(
        "helicone",
        dry_run=True,
        providers_root=tmp_path,
        fetcher=StaticFetcher([make_source("gpt-4o-mini")]),
        run_date=run_date,
    )

    assert report.created == 1
    assert report.deleted == ("old-model",)
    assert stale.is_file()
    assert not (tmp_path / "helicone" / "models" / "gpt-4o-mini.toml").exists()


def test_env_root_is_used(
    tmp_path: Path, run_date: date, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CATALOGSYNC_PROVIDERS_ROOT", str(tmp_path))

    sync_provider(
        "venice", fetcher=StaticFetcher([make_source("qwen3-4b")]), run_date=run_date
    )

    assert (tmp_path / "venice" / "models" / "qwen3-4b.toml").is_file()


def test_cloudflare_end_to_end(
    tmp_path: Path, run_date: date, load_payload: Callable[[str], object]
) -> None:
    canonical = make_record(
        "gpt-4o", name="GPT-4o", limit=Limit(context=128_000, output=16_384)
    )
    _write(tmp_path, "openai", "gpt-4o", serialize_record(canonical))
    _write(tmp_path, "anthropic", "claude-3-5-haiku-latest", 'name = "Partial"\n')
    orphan = _write(
        tmp_path,
        "cloudflare-ai-gateway",
        "workers-ai/@cf/retired/model",
        serialize_record(make_record("workers-ai/@cf/retired/model")),
    )
    catalog = parse_cloudflare(load_payload("cloudflare_models.json"))
    fetcher = StaticFetcher(
        FetchSuccess(models=tuple(catalog.models), unsupported_ids=tuple(catalog.unsupported_ids))
    )

    report = sync_provider(
        "cloudflare-ai-gateway", providers_root=tmp_path, fetcher=fetcher, run_date=run_date
    )

    models_dir = tmp_path / "cloudflare-ai-gateway" / "models"
    copied = tomllib.loads((models_dir / "openai" / "gpt-4o.toml").read_text(encoding="utf-8"))
    haiku = tomllib.loads(
        (models_dir / "anthropic" / "claude-3.5-haiku.toml").read_text(encoding="utf-8")
    )
    workers = tomllib.loads(
        (models_dir / "workers-ai" / "@cf" / "meta" / "llama-3.1-8b-instruct.toml").read_text(
            encoding="utf-8"
        )
    )

    assert report.created == 4
    assert report.skipped == 4
    assert report.cross_referenced == 1
    assert report.deleted == ("workers-ai/@cf/retired/model",)
    assert not orphan.exists()
    assert copied["name"] == "GPT-4o"
    assert copied["last_updated"] == "2025-01-20"
    assert haiku["name"] == "anthropic/claude-3.5-haiku"
    assert haiku["limit"] == {"context": 128_000, "output": 16_384}
    assert haiku["cost"] == {"input": 0.8, "output": 4}
    assert workers["release_date"] == "2024-07-22"
    assert not (models_dir / "openai" / "gpt-4o-2024-08-06.toml").exists()


def _vercel_fetcher(payload: object) -> HttpCatalogFetcher:
    def factory(config: HttpSourceConfig) -> CatalogHttpClient:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
        return CatalogHttpClient(config, transport=transport)

    profile = get_provider_profile("vercel")
    return HttpCatalogFetcher(
        config=profile.http_config(), parse=parse_vercel, client_factory=factory
    )


def test_vercel_catalog_is_stable_across_runs(
    tmp_path: Path, run_date: date, load_payload: Callable[[str], object]
) -> None:
    fetcher = _vercel_fetcher(load_payload("vercel_models.json"))
    first = sync_provider("vercel", providers_root=tmp_path, fetcher=fetcher, run_date=run_date)

    second = sync_provider("vercel", providers_root=tmp_path, fetcher=fetcher, run_date=run_date)

    assert first.created == 3
    assert (second.created, second.updated, second.unchanged) == (0, 0, 3)


def test_negative_price_is_rejected_on_every_run(tmp_path: Path, run_date: date) -> None:
    payload = {
        "data": [
            {
                "id": "acme/widget",
                "name": "Widget",
                "created": 0,
                "context_window": 8_000,
                "max_tokens": 1_000,
                "type": "language",
                "pricing": {"input": "-0.000001", "output": "0.000002"},
            }
        ]
    }
    fetcher = _vercel_fetcher(payload)

    for _ in range(2):
        with pytest.raises(ValidationError):
            sync_provider("vercel", providers_root=tmp_path, fetcher=fetcher, run_date=run_date)

    assert not (tmp_path / "vercel").exists()


def test_jiekou_never_rewrites_existing_records(
    tmp_path: Path, run_date: date, load_payload: Callable[[str], object]
) -> None:
    curated = _write(
        tmp_path, "jiekou", "gpt-5.1", serialize_record(make_record("gpt-5.1", name="GPT-5.1"))
    )
    before = curated.read_text(encoding="utf-8")
    catalog = parse_jiekou(load_payload("jiekou_models.json"))
    fetcher = StaticFetcher(FetchSuccess(models=tuple(catalog.models)))

    report = sync_provider("jiekou", providers_root=tmp_path, fetcher=fetcher, run_date=run_date)

    deepseek = tomllib.loads(
        (tmp_path / "jiekou" / "models" / "deepseek" / "deepseek-r1-0528.toml").read_text(
            encoding="utf-8"
        )
    )
    assert (report.created, report.updated, report.unchanged) == (2, 0, 1)
    assert curated.read_text(encoding="utf-8") == before
    assert deepseek["release_date"] == "2025-02-01"
    assert deepseek["cost"] == {"input": 0.7, "output": 2.5}
