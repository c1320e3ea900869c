"""Tests for SynchronizationManager ingestion callbacks."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from contentsync import ManyLinks, SingleLink, SynchronizationManager, SyncError, decode_array
from tests.fakes.payloads import CREATED, UPDATED, asset_link, entry_link, make_asset, make_entry
from tests.fakes.records import Author, LocalAsset, Post, Profile
from tests.fakes.store import FlakyStore


def test_create_asset_populates_record(manager: SynchronizationManager, store: FlakyStore) -> None:
    record = manager.create_asset(
        make_asset("a1", title="Logo", description="The logo", url="https://cdn.example/logo.png")
    )

    assert store.records(LocalAsset) == [record]
    assert record.id == "a1"
    assert record.title == "Logo"
    assert record.asset_description == "The logo"
    assert record.url_string == "https://cdn.example/logo.png"
    assert record.created_at == CREATED
    assert record.updated_at == UPDATED


def test_create_asset_twice_updates_single_record(manager: SynchronizationManager, store: FlakyStore) -> None:
    later = datetime(2024, 3, 1, tzinfo=timezone.utc)
    first = manager.create_asset(make_asset("a1", title="Old"))
    second = manager.create_asset(make_asset("a1", title="New", updated_at=later))

    records = store.records(LocalAsset)
    assert len(records) == 1
    assert second is first
    assert records[0].title == "New"
    assert records[0].updated_at == later


def test_create_asset_overwrites_with_absent_values(manager: SynchronizationManager) -> None:
    manager.create_asset(make_asset("a1", title="Logo", description="desc"))
    record = manager.create_asset(make_asset("a1", title=None, description=None))

    assert record.title is None
    assert record.asset_description is None


def test_create_entry_twice_yields_one_record_with_later_values(
    manager: SynchronizationManager, store: FlakyStore
) -> None:
    manager.create_entry(make_entry("p1", "post", {"title": "Draft"}))
    manager.create_entry(make_entry("p1", "post", {"title": "Published"}))

    records = store.records(Post)
    assert len(records) == 1
    assert records[0].title == "Published"


def test_create_entry_sets_sys_fields_and_mapped_properties(manager: SynchronizationManager) -> None:
    record = manager.create_entry(make_entry("p1", "post", {"title": "Hello", "body": "World", "unknown": 1}))

    assert isinstance(record, Post)
    assert record.id == "p1"
    assert record.created_at == CREATED
    assert record.updated_at == UPDATED
    assert record.title == "Hello"
    assert record.body == "World"


def test_create_entry_encodes_array_fields_as_blob(manager: SynchronizationManager) -> None:
    record = manager.create_entry(make_entry("p1", "post", {"tags": ["python", "sync"]}))

    assert isinstance(record, Post)
    assert isinstance(record.tags, bytes)
    assert decode_array(record.tags) == ["python", "sync"]


def test_create_entry_with_unknown_content_type_is_skipped(
    manager: SynchronizationManager, store: FlakyStore
) -> None:
    assert manager.create_entry(make_entry("x1", "recipe", {"title": "Soup"})) is None
    assert manager.create_entry(make_entry("x2", None)) is None

    assert all(not store.records(entry_type) for entry_type in (Author, Post, Profile))
    assert manager.pending_relationships == 0


def test_create_entry_records_single_and_many_links(manager: SynchronizationManager) -> None:
    manager.create_entry(
        make_entry(
            "p1",
            "post",
            {
                "author": entry_link("au1"),
                "hero": asset_link("a1"),
                "related": [entry_link("p2"), entry_link("p3"), entry_link("p2")],
            },
        )
    )

    pending = manager._ledger.pending("p1")
    assert pending == {
        "author": SingleLink(id="au1", link_type="Entry"),
        "hero": SingleLink(id="a1", link_type="Asset"),
        "related": ManyLinks(ids=("p2", "p3", "p2"), link_type="Entry"),
    }


def test_create_entry_ignores_non_link_relationship_values(manager: SynchronizationManager) -> None:
    manager.create_entry(make_entry("p1", "post", {"author": "au1", "related": [entry_link("p2"), 5]}))

    assert manager._ledger.pending("p1") == {"related": ManyLinks(ids=("p2",), link_type="Entry")}


def test_reingesting_entry_replaces_its_pending_relationships(manager: SynchronizationManager) -> None:
    manager.create_entry(make_entry("p1", "post", {"author": entry_link("au1")}))
    manager.create_entry(make_entry("p1", "post", {"related": [entry_link("p2")]}))

    assert manager.pending_relationships == 1
    assert manager._ledger.pending("p1") == {"related": ManyLinks(ids=("p2",), link_type="Entry")}


def test_delete_asset_removes_record(manager: SynchronizationManager, store: FlakyStore) -> None:
    manager.create_asset(make_asset("a1"))
    manager.create_asset(make_asset("a2"))

    assert manager.delete_asset("a1") == 1
    assert [record.id for record in store.records(LocalAsset)] == ["a2"]


def test_delete_entry_removes_from_holding_type_only(manager: SynchronizationManager, store: FlakyStore) -> None:
    manager.create_entry(make_entry("p1", "post"))
    manager.create_entry(make_entry("au1", "author"))

    assert manager.delete_entry("au1") == 1
    assert store.records(Author) == []
    assert [record.id for record in store.records(Post)] == ["p1"]

    delete_types = [op.type_name for op in store.operations if op.name == "delete"]
    assert delete_types == ["Author", "Post", "Widget", "Profile"]


def test_delete_unknown_ids_is_a_noop(manager: SynchronizationManager) -> None:
    assert manager.delete_entry("missing") == 0
    assert manager.delete_asset("missing") == 0


def test_delete_failures_are_swallowed(manager: SynchronizationManager, store: FlakyStore) -> None:
    manager.create_entry(make_entry("p1", "post"))
    store.fail("delete", Author)

    assert manager.delete_entry("p1") == 1
    assert store.records(Post) == []

    store.fail("delete", LocalAsset)
    assert manager.delete_asset("a1") == 0


def test_fetch_failure_is_treated_as_no_match(manager: SynchronizationManager, store: FlakyStore) -> None:
    store.fail("fetch_all", Post)

    record = manager.create_entry(make_entry("p1", "post", {"title": "Hello"}))

    assert record is not None
    assert record.title == "Hello"


def test_create_failure_is_fatal(manager: SynchronizationManager, store: FlakyStore) -> None:
    store.fail("create", Post)

    with pytest.raises(SyncError, match="failed to create Post record"):
        manager.create_entry(make_entry("p1", "post"))


def test_save_failure_is_fatal(manager: SynchronizationManager, store: FlakyStore) -> None:
    store.fail("save")

    with pytest.raises(SyncError, match="failed to save"):
        manager.save()


def test_save_commits_store(manager: SynchronizationManager, store: FlakyStore) -> None:
    manager.save()

    assert store.commits == 1


def test_relationship_introspection_failure_records_no_links(
    manager: SynchronizationManager, store: FlakyStore
) -> None:
    store.fail("relationships", Post)

    record = manager.create_entry(make_entry("p1", "post", {"title": "t", "author": entry_link("au1")}))

    assert record is not None
    assert manager._ledger.pending("p1") == {}


def test_manager_reports_integration_name_and_version(manager: SynchronizationManager) -> None:
    assert manager.name == "contentsync"
    assert isinstance(manager.version, str)
