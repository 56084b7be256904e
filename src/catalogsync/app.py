"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.adapters.registry import build_catalog_fetcher
from catalogsync.adapters.toml_store import TomlCatalogStore
from catalogsync.config.providers import get_provider_profile
from catalogsync.config.storage import StorageConfig, get_storage_config
from catalogsync.domain.data_integration import SyncReport, sync_catalog
from catalogsync.domain.ports.persistence import PersistedRecordParseError

if TYPE_CHECKING:
    from datetime import date
    from pathlib import Path

    from catalogsync.domain.model import CatalogRecord, ModelId, ProviderId
    from catalogsync.domain.ports.fetching import CatalogFetcher
    from catalogsync.domain.reconciliation import CanonicalLookup

log = getLogger(__name__)


def open_store(storage: StorageConfig, provider_id: ProviderId) -> TomlCatalogStore:
    return TomlCatalogStore(storage.models_dir(provider_id), provider_id=provider_id)


def canonical_lookup_for(storage: StorageConfig) -> CanonicalLookup:
    """Look up complete records maintained under other providers in the same root."""

    def lookup(provider_id: ProviderId, model_id: ModelId) -> CatalogRecord | None:
        store = open_store(storage, provider_id)
        try:
            existing = store.load(model_id)
        except (PersistedRecordParseError, ValueError) as exc:
            log.warning("Ignoring canonical %s/%s: %s", provider_id, model_id, exc)
            return None
        if existing is None:
            return None
        record = existing.as_complete()
        if record is None:
            log.warning("Ignoring canonical %s/%s: record incomplete", provider_id, model_id)
        return record

    return lookup


def sync_provider(
    provider_id: ProviderId,
    *,
    dry_run: bool = False,
    new_only: bool = False,
    providers_root: Path | None = None,
    fetcher: CatalogFetcher | None = None,
    run_date: date | None = None,
) -> SyncReport:
    """Synchronise one provider's catalog using the configured adapters."""

    profile = get_provider_profile(provider_id)
    storage = get_storage_config(providers_root)
    effective_fetcher = fetcher or build_catalog_fetcher(profile)
    store = open_store(storage, provider_id)
    lookup = canonical_lookup_for(storage) if profile.rules.cross_reference else None

    log.info(
        "Starting %s sync: models_dir=%s, dry_run=%s, new_only=%s",
        profile.display_name,
        store.models_dir,
        dry_run,
        new_only,
    )

    report = sync_catalog(
        fetcher=effective_fetcher,
        store=store,
        rules=profile.rules,
        dry_run=dry_run,
        new_only=new_only,
        run_date=run_date,
        canonical_lookup=lookup,
    )

    log.info(
        "Finished %s sync: fetched=%s, cross_referenced=%s, deleted=%s",
        profile.display_name,
        report.fetched,
        report.cross_referenced,
        len(report.deleted),
    )
    return report
