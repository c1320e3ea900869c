"""Tests for remote payload contracts."""

from __future__ import annotations

from contentsync import DeltaDocument, Entry, Link


def test_entry_coerces_link_shaped_field_values() -> None:
    entry = Entry.model_validate(
        {
            "sys": {"id": "p1", "contentTypeId": "post"},
            "fields": {
                "title": "Hello",
                "author": {"type": "Link", "id": "au1"},
                "hero": {"type": "Link", "id": "a1", "linkType": "Asset"},
                "related": [{"type": "Link", "id": "p2"}, {"type": "Link", "id": "p3"}],
                "meta": {"type": "Other", "id": "x"},
                "tags": ["a", "b"],
            },
        }
    )

    assert entry.id == "p1"
    assert entry.content_type_id == "post"
    assert entry.fields["title"] == "Hello"
    assert entry.fields["author"] == Link(id="au1")
    assert entry.fields["hero"] == Link(id="a1", link_type="Asset")
    assert entry.fields["related"] == [Link(id="p2"), Link(id="p3")]
    assert entry.fields["meta"] == {"type": "Other", "id": "x"}
    assert entry.fields["tags"] == ["a", "b"]


def test_delta_document_accepts_camel_case_keys() -> None:
    document = DeltaDocument.model_validate(
        {
            "syncToken": "abc",
            "pages": [
                {
                    "assets": [{"sys": {"id": "a1", "updatedAt": "2024-02-01T00:00:00Z"}, "title": "Logo"}],
                    "deletedEntryIds": ["e9"],
                }
            ],
        }
    )

    page = document.pages[0]
    assert document.sync_token == "abc"
    assert page.assets[0].id == "a1"
    assert page.assets[0].sys.updated_at is not None
    assert page.deleted_entry_ids == ["e9"]
    assert page.event_count == 2


def test_link_without_link_type_stays_untyped() -> None:
    entry = Entry.model_validate(
        {"sys": {"id": "p1", "contentTypeId": "post"}, "fields": {"hero": {"type": "Link", "id": "a1"}}}
    )

    assert entry.fields["hero"].link_type is None
