"""Tests for FieldMapper derivation, caching and assignment."""

from __future__ import annotations

import pytest

from contentsync import FieldMapper, SynchronizationManager, SyncError, decode_array, encode_array
from tests.fakes.payloads import make_entry
from tests.fakes.records import MODEL, Post, Profile, Widget
from tests.fakes.store import FlakyStore


def test_derived_mapping_is_intersection_of_properties_and_fields(store: FlakyStore) -> None:
    mapper = FieldMapper(store, MODEL.entry_types)

    mapping = mapper.mapping_for(Widget, {"a": 1, "b": 2, "x": 3})

    assert mapping == {"a": "a", "b": "b"}
    assert mapper.cached_mapping("widget") == {"a": "a", "b": "b"}


def test_derived_mapping_is_reused_for_same_content_type(store: FlakyStore) -> None:
    mapper = FieldMapper(store, MODEL.entry_types)
    mapper.mapping_for(Widget, {"a": 1, "b": 2, "x": 3})
    calls_after_first = len(store.properties_calls)

    second = mapper.mapping_for(Widget, {"a": 1, "c": 3})

    assert second == {"a": "a", "b": "b"}
    assert len(store.properties_calls) == calls_after_first


def test_mapping_cache_applies_through_manager(manager: SynchronizationManager, store: FlakyStore) -> None:
    manager.create_entry(make_entry("w1", "widget", {"a": "1", "b": "2", "x": "3"}))
    record = manager.create_entry(make_entry("w2", "widget", {"a": "4", "c": "5"}))

    assert isinstance(record, Widget)
    assert record.a == "4"
    assert record.b is None
    assert record.c is None


def test_empty_intersection_maps_nothing(store: FlakyStore) -> None:
    mapper = FieldMapper(store, MODEL.entry_types)
    record = Widget()

    mapper.apply(record, Widget, {"x": 1, "y": 2})

    assert mapper.cached_mapping("widget") == {}
    assert record.model_dump(exclude={"id", "created_at", "updated_at"}) == {"a": None, "b": None, "c": None}


def test_explicit_mapping_is_used_verbatim_and_not_cached(store: FlakyStore) -> None:
    mapper = FieldMapper(store, MODEL.entry_types)
    record = Profile()

    mapper.apply(record, Profile, {"name": "Grace", "display_name": "ignored"})

    assert record.display_name == "Grace"
    assert mapper.cached_mapping("profile") is None


def test_explicit_mapping_to_unknown_property_is_skipped(store: FlakyStore) -> None:
    class Broken(Profile):
        @classmethod
        def field_mapping(cls) -> dict[str, str] | None:
            return {"name": "nickname"}

    mapper = FieldMapper(store, [Broken])
    record = Broken()

    mapper.apply(record, Broken, {"name": "Grace"})

    assert record.display_name is None


def test_accessor_table_covers_properties_and_relationships(store: FlakyStore) -> None:
    mapper = FieldMapper(store, MODEL.entry_types)

    assert set(mapper.accessors(Post)) == {"title", "body", "tags", "author", "hero", "related"}


def test_schema_introspection_failure_is_fatal(store: FlakyStore) -> None:
    store.fail("properties", Post)

    with pytest.raises(SyncError, match="cannot introspect schema for Post"):
        FieldMapper(store, MODEL.entry_types)


def test_array_blob_round_trip_keeps_nested_values() -> None:
    blob = encode_array(["a", 1, {"k": [True, None]}])

    assert isinstance(blob, bytes)
    assert decode_array(blob) == ["a", 1, {"k": [True, None]}]
