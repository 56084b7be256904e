"""Application services for syncing one provider's catalog into the store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.domain.model import OrphanPolicy, RecordOutcome
from catalogsync.domain.ports.fetching import FetchFailure
from catalogsync.domain.ports.persistence import PersistedRecordParseError
from catalogsync.domain.reconciliation import (
    Excluded,
    InclusionFilter,
    InclusionRules,
    ReconcilePolicy,
    Reconciler,
    diff,
    find_orphans,
    resolve_cross_reference,
    same_content,
)

if TYPE_CHECKING:
    from datetime import date

    from catalogsync.domain.model import CatalogRecord, ExistingRecord, ModelId
    from catalogsync.domain.ports.fetching import CatalogFetcher
    from catalogsync.domain.ports.persistence import CatalogStore
    from catalogsync.domain.reconciliation import (
        CanonicalLookup,
        Change,
        CrossReferenceRules,
    )

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderRules:
    """Everything the sync needs to know about one provider besides its fetcher."""

    provider_id: str
    inclusion: InclusionRules = field(
        default_factory=lambda: InclusionRules(include_everything=True)
    )
    reconcile: ReconcilePolicy = field(default_factory=ReconcilePolicy)
    orphan_policy: OrphanPolicy = OrphanPolicy.WARN_ONLY
    cross_reference: CrossReferenceRules | None = None
    # Never rewrite a record that already exists on disk.
    create_only: bool = False


@dataclass(slots=True)
class RecordSync:
    model_id: ModelId
    outcome: RecordOutcome
    changes: tuple[Change, ...] = ()
    cross_referenced: bool = False


@dataclass(slots=True)
class SyncReport:
    """Outcome of a provider sync run."""

    provider_id: str
    fetched: int = 0
    created: int = 0
    updated: int = 0
    unchanged: int = 0
    skipped: int = 0
    cross_referenced: int = 0
    orphaned: tuple[ModelId, ...] = ()
    deleted: tuple[ModelId, ...] = ()
    records: list[RecordSync] = field(default_factory=list)
    dry_run: bool = False

    def record(self, entry: RecordSync) -> None:
        self.records.append(entry)
        if entry.outcome is RecordOutcome.CREATED:
            self.created += 1
        elif entry.outcome is RecordOutcome.UPDATED:
            self.updated += 1
        else:
            self.unchanged += 1
        if entry.cross_referenced:
            self.cross_referenced += 1

    def summary(self) -> str:
        return (
            f"{self.created} created, {self.updated} updated, {self.unchanged} unchanged, "
            f"{self.skipped} skipped, {len(self.orphaned)} orphaned"
        )


class DryRunStore:
    """Store wrapper that reads through and only logs mutations."""

    def __init__(self, inner: CatalogStore) -> None:
        self._inner = inner

    @property
    def provider_id(self) -> str:
        return self._inner.provider_id

    def list_ids(self) -> set[ModelId]:
        return self._inner.list_ids()

    def load(self, model_id: ModelId) -> ExistingRecord | None:
        return self._inner.load(model_id)

    def save(self, record: CatalogRecord) -> None:
        log.info("[dry-run] would write %s/%s", self.provider_id, record.model_id)

    def delete(self, model_id: ModelId) -> None:
        log.info("[dry-run] would delete %s/%s", self.provider_id, model_id)


def sync_catalog(
    *,
    fetcher: CatalogFetcher,
    store: CatalogStore,
    rules: ProviderRules,
    dry_run: bool = False,
    new_only: bool = False,
    run_date: date | None = None,
    canonical_lookup: CanonicalLookup | None = None,
) -> SyncReport:
    """Fetch a provider catalog and reconcile it into ``store``.

    Raises :class:`~catalogsync.domain.ports.fetching.CatalogFetchError` when the
    fetch fails; in that case nothing has been written.
    """

    new_only = new_only or rules.create_only
    result = fetcher()
    if isinstance(result, FetchFailure):
        result.raise_for_failure()

    today = run_date or datetime.now(UTC).date()
    inclusion = InclusionFilter(rules.inclusion)
    reconciler = Reconciler(policy=rules.reconcile)
    target: CatalogStore = DryRunStore(store) if dry_run else store

    report = SyncReport(provider_id=rules.provider_id, fetched=len(result.models), dry_run=dry_run)
    existing_ids = store.list_ids()
    processed: set[ModelId] = set()

    for model_id in result.unsupported_ids:
        log.debug("Skipping %s: unsupported by the %s adapter", model_id, rules.provider_id)
    report.skipped += len(result.unsupported_ids)

    for source in result.models:
        model_id = source.model_id
        decision = inclusion.classify(model_id)
        if isinstance(decision, Excluded):
            log.debug("Skipping %s: %s (%s)", model_id, decision.reason, decision.rule)
            report.skipped += 1
            continue
        if model_id in processed:
            log.warning("Duplicate id %s in %s catalog; keeping first", model_id, rules.provider_id)
            report.skipped += 1
            continue
        processed.add(model_id)

        existing = _load_existing(store, model_id)

        merged: CatalogRecord | None = None
        if rules.cross_reference is not None and canonical_lookup is not None:
            merged = resolve_cross_reference(
                model_id, rules=rules.cross_reference, lookup=canonical_lookup
            )
        cross_referenced = merged is not None
        if merged is None:
            merged = reconciler.reconcile(source, existing, today)

        entry = _apply(target, existing, merged, new_only=new_only)
        entry.cross_referenced = cross_referenced
        _log_entry(entry, dry_run=dry_run)
        report.record(entry)

    report.orphaned = find_orphans(existing_ids, processed)
    report.deleted = _handle_orphans(target, report.orphaned, rules.orphan_policy, dry_run=dry_run)

    log.info(
        "%s%s sync: %s",
        "[dry-run] " if dry_run else "",
        rules.provider_id,
        report.summary(),
    )
    return report


def _load_existing(store: CatalogStore, model_id: ModelId) -> ExistingRecord | None:
    try:
        return store.load(model_id)
    except PersistedRecordParseError as exc:
        log.warning("Treating %s as new: stored record unreadable (%s)", model_id, exc)
        return None


def _apply(
    store: CatalogStore,
    existing: ExistingRecord | None,
    merged: CatalogRecord,
    *,
    new_only: bool,
) -> RecordSync:
    model_id = merged.model_id
    if existing is None:
        store.save(merged)
        return RecordSync(model_id, RecordOutcome.CREATED)

    changes = tuple(diff(existing, merged))
    if new_only or same_content(existing, merged):
        return RecordSync(model_id, RecordOutcome.UNCHANGED, changes)

    store.save(merged)
    return RecordSync(model_id, RecordOutcome.UPDATED, changes)


def _log_entry(entry: RecordSync, *, dry_run: bool) -> None:
    prefix = "[dry-run] " if dry_run else ""
    source = " (cross-referenced)" if entry.cross_referenced else ""
    if entry.outcome is RecordOutcome.CREATED:
        log.info("%sCreated %s%s", prefix, entry.model_id, source)
    elif entry.outcome is RecordOutcome.UPDATED:
        log.info("%sUpdated %s%s", prefix, entry.model_id, source)
        for change in entry.changes:
            log.info("  %s", change)
    elif entry.changes:
        log.debug("%sLeaving %s as is; pending changes:", prefix, entry.model_id)
        for change in entry.changes:
            log.debug("  %s", change)


def _handle_orphans(
    store: CatalogStore,
    orphans: tuple[ModelId, ...],
    policy: OrphanPolicy,
    *,
    dry_run: bool,
) -> tuple[ModelId, ...]:
    if not orphans:
        return ()
    if policy is OrphanPolicy.WARN_ONLY:
        for model_id in orphans:
            log.warning("Orphaned %s/%s: no longer listed upstream", store.provider_id, model_id)
        return ()

    for model_id in orphans:
        log.info("%sDeleting orphaned %s", "[dry-run] " if dry_run else "", model_id)
        store.delete(model_id)
    return orphans
