from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

import pytest

from catalogsync.domain.data_integration import ProviderRules, sync_catalog
from catalogsync.domain.model import (
    ExistingLimit,
    ExistingRecord,
    Limit,
    OrphanPolicy,
    RecordOutcome,
)
from catalogsync.domain.ports.fetching import (
    FetchFailure,
    FetchFailureKind,
    FetchSuccess,
    TransportError,
    ValidationError,
)
from catalogsync.domain.reconciliation import CrossReferenceRules, InclusionRules
from tests.helpers.catalog import InMemoryCatalogStore, StaticFetcher, make_record, make_source

if TYPE_CHECKING:
    from datetime import date

    from catalogsync.domain.model import CatalogRecord

RULES = ProviderRules(provider_id="acme")


def test_first_run_creates_records(run_date: date) -> None:
    store = InMemoryCatalogStore()
    fetcher = StaticFetcher([make_source("acme/a"), make_source("acme/b")])

    report = sync_catalog(fetcher=fetcher, store=store, rules=RULES, run_date=run_date)

    assert fetcher.calls == 1
    assert (report.fetched, report.created, report.updated, report.unchanged) == (2, 2, 0, 0)
    assert sorted(store.records) == ["acme/a", "acme/b"]
    assert store.records["acme/a"].last_updated == "2025-02-01"


def test_second_run_is_idempotent(run_date: date) -> None:
    store = InMemoryCatalogStore()
    fetcher = StaticFetcher([make_source("acme/a")])
    sync_catalog(fetcher=fetcher, store=store, rules=RULES, run_date=run_date)
    store.saved.clear()

    report = sync_catalog(fetcher=fetcher, store=store, rules=RULES, run_date=run_date)

    assert (report.created, report.updated, report.unchanged) == (0, 0, 1)
    assert store.saved == []


def test_changed_source_updates_record(run_date: date) -> None:
    store = InMemoryCatalogStore([make_record("acme/a")])
    fetcher = StaticFetcher([make_source("acme/a", name="Widget A")])

    report = sync_catalog(fetcher=fetcher, store=store, rules=RULES, run_date=run_date)

    assert report.updated == 1
    [entry] = report.records
    assert entry.outcome is RecordOutcome.UPDATED
    assert [change.field for change in entry.changes] == ["name"]
    assert store.records["acme/a"].name == "Widget A"
    assert store.records["acme/a"].last_updated == "2025-02-01"


def test_sticky_output_limit_survives_sync(run_date: date) -> None:
    existing = ExistingRecord(
        model_id="acme/a",
        name="Widget 1",
        limit=ExistingLimit(context=128_000, output=4_000),
    )
    store = InMemoryCatalogStore([existing])

    sync_catalog(
        fetcher=StaticFetcher([make_source("acme/a", output_limit=8_000)]),
        store=store,
        rules=RULES,
        run_date=run_date,
    )

    assert store.records["acme/a"].limit.output == 4_000


def test_dry_run_writes_nothing_but_reports_the_same(run_date: date) -> None:
    records = [make_record("acme/a"), make_record("acme/stale")]
    fetcher = StaticFetcher([make_source("acme/a", name="Widget A"), make_source("acme/b")])
    rules = ProviderRules(provider_id="acme", orphan_policy=OrphanPolicy.DELETE_IMMEDIATELY)

    dry_store = InMemoryCatalogStore(records)
    dry = sync_catalog(
        fetcher=fetcher, store=dry_store, rules=rules, dry_run=True, run_date=run_date
    )
    real = sync_catalog(
        fetcher=fetcher,
        store=InMemoryCatalogStore(records),
        rules=rules,
        run_date=run_date,
    )

    assert dry_store.saved == []
    assert dry_store.deleted == []
    assert dry.dry_run
    assert (dry.created, dry.updated, dry.unchanged) == (real.created, real.updated, real.unchanged)
    assert dry.orphaned == real.orphaned == ("acme/stale",)
    assert dry.deleted == real.deleted == ("acme/stale",)


def test_new_only_leaves_existing_records_alone(run_date: date) -> None:
    store = InMemoryCatalogStore([make_record("acme/a")])
    fetcher = StaticFetcher([make_source("acme/a", name="Widget A"), make_source("acme/b")])

    report = sync_catalog(
        fetcher=fetcher, store=store, rules=RULES, new_only=True, run_date=run_date
    )

    assert (report.created, report.updated, report.unchanged) == (1, 0, 1)
    assert [record.model_id for record in store.saved] == ["acme/b"]
    assert store.records["acme/a"].name == "Widget 1"


def test_create_only_rules_never_rewrite(run_date: date) -> None:
    store = InMemoryCatalogStore([make_record("acme/a")])
    rules = ProviderRules(provider_id="acme", create_only=True)

    report = sync_catalog(
        fetcher=StaticFetcher([make_source("acme/a", name="Widget A")]),
        store=store,
        rules=rules,
        run_date=run_date,
    )

    assert report.unchanged == 1
    assert store.saved == []
    assert store.records["acme/a"].name == "Widget 1"


def test_excluded_and_unsupported_ids_are_skipped(run_date: date) -> None:
    rules = ProviderRules(
        provider_id="acme",
        inclusion=InclusionRules(skip_substrings=("embed",), include_everything=True),
    )
    fetcher = StaticFetcher(
        FetchSuccess(
            models=(make_source("acme/a"), make_source("acme/embed-small")),
            unsupported_ids=("acme/image-gen",),
        )
    )
    store = InMemoryCatalogStore()

    report = sync_catalog(fetcher=fetcher, store=store, rules=rules, run_date=run_date)

    assert report.skipped == 2
    assert report.created == 1
    assert sorted(store.records) == ["acme/a"]


def test_duplicate_ids_keep_first(run_date: date, caplog: pytest.LogCaptureFixture) -> None:
    store = InMemoryCatalogStore()
    fetcher = StaticFetcher(
        [make_source("acme/a", name="First"), make_source("acme/a", name="Second")]
    )

    with caplog.at_level(logging.WARNING):
        report = sync_catalog(fetcher=fetcher, store=store, rules=RULES, run_date=run_date)

    assert report.created == 1
    assert store.records["acme/a"].name == "First"
    assert report.skipped == 1
    assert "Duplicate id acme/a" in caplog.text


def test_orphans_are_only_reported_by_default(
    run_date: date, caplog: pytest.LogCaptureFixture
) -> None:
    store = InMemoryCatalogStore([make_record("acme/a"), make_record("acme/gone")])

    with caplog.at_level(logging.WARNING):
        report = sync_catalog(
            fetcher=StaticFetcher([make_source("acme/a")]),
            store=store,
            rules=RULES,
            run_date=run_date,
        )

    assert report.orphaned == ("acme/gone",)
    assert report.deleted == ()
    assert "acme/gone" in store.records
    assert "no longer listed upstream" in caplog.text


def test_orphans_deleted_when_policy_says_so(run_date: date) -> None:
    store = InMemoryCatalogStore([make_record("acme/a"), make_record("acme/gone")])
    rules = ProviderRules(provider_id="acme", orphan_policy=OrphanPolicy.DELETE_IMMEDIATELY)

    report = sync_catalog(
        fetcher=StaticFetcher([make_source("acme/a")]),
        store=store,
        rules=rules,
        run_date=run_date,
    )

    assert report.deleted == ("acme/gone",)
    assert store.deleted == ["acme/gone"]


def test_excluded_models_become_orphans(run_date: date) -> None:
    rules = ProviderRules(
        provider_id="acme",
        inclusion=InclusionRules(skip_substrings=("legacy",), include_everything=True),
        orphan_policy=OrphanPolicy.DELETE_IMMEDIATELY,
    )
    store = InMemoryCatalogStore([make_record("acme/legacy-1")])

    report = sync_catalog(
        fetcher=StaticFetcher([make_source("acme/legacy-1")]),
        store=store,
        rules=rules,
        run_date=run_date,
    )

    assert report.skipped == 1
    assert report.deleted == ("acme/legacy-1",)


def test_unreadable_record_is_recreated(run_date: date, caplog: pytest.LogCaptureFixture) -> None:
    store = InMemoryCatalogStore(unreadable=["acme/a"])

    with caplog.at_level(logging.WARNING):
        report = sync_catalog(
            fetcher=StaticFetcher([make_source("acme/a")]),
            store=store,
            rules=RULES,
            run_date=run_date,
        )

    assert report.created == 1
    assert report.orphaned == ()
    assert "stored record unreadable" in caplog.text


@pytest.mark.parametrize(
    ("failure", "error"),
    [
        (FetchFailure(FetchFailureKind.TRANSPORT, "boom", status_code=503), TransportError),
        (FetchFailure(FetchFailureKind.VALIDATION, "bad payload"), ValidationError),
    ],
)
def test_fetch_failure_aborts_before_writing(
    run_date: date, failure: FetchFailure, error: type[Exception]
) -> None:
    store = InMemoryCatalogStore([make_record("acme/a")])
    rules = ProviderRules(provider_id="acme", orphan_policy=OrphanPolicy.DELETE_IMMEDIATELY)

    with pytest.raises(error):
        sync_catalog(fetcher=StaticFetcher(failure), store=store, rules=rules, run_date=run_date)

    assert store.saved == []
    assert store.deleted == []


def test_cross_referenced_record_is_copied(run_date: date) -> None:
    canonical = make_record("gpt-4o", name="GPT-4o", limit=Limit(context=128_000, output=16_384))
    canonical_records = {("openai", "gpt-4o"): canonical}

    def lookup(provider: str, model_id: str) -> CatalogRecord | None:
        return canonical_records.get((provider, model_id))

    rules = ProviderRules(
        provider_id="gateway",
        cross_reference=CrossReferenceRules(
            providers=frozenset({"openai"}), aliases=MappingProxyType({})
        ),
    )
    store = InMemoryCatalogStore(provider_id="gateway")
    fetcher = StaticFetcher(
        [make_source("openai/gpt-4o", name="gpt-4o"), make_source("openai/gpt-5", name="gpt-5")]
    )

    report = sync_catalog(
        fetcher=fetcher,
        store=store,
        rules=rules,
        run_date=run_date,
        canonical_lookup=lookup,
    )

    assert report.created == 2
    assert report.cross_referenced == 1
    copied = store.records["openai/gpt-4o"]
    assert copied.name == "GPT-4o"
    assert copied.limit.output == 16_384
    assert copied.last_updated == "2025-01-20"
    assert store.records["openai/gpt-5"].name == "gpt-5"
