"""Remote delta payload contracts."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LinkType = Literal["Entry", "Asset"]


class Link(BaseModel):
    """Reference from an entry field to another remote entity."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    link_type: LinkType | None = Field(default=None, alias="linkType")


class Sys(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    content_type_id: str | None = Field(default=None, alias="contentTypeId")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class Asset(BaseModel):
    sys: Sys
    title: str | None = None
    description: str | None = None
    url: str | None = None

    @property
    def id(self) -> str:
        return self.sys.id


def _coerce_link(value: Any) -> Any:
    if isinstance(value, dict) and value.get("type") == "Link" and "id" in value:
        return Link.model_validate({key: val for key, val in value.items() if key != "type"})
    return value


class Entry(BaseModel):
    """A structured content entity with opaque field values.

    Field values shaped ``{"type": "Link", "id": ...}`` (alone or in a list)
    are coerced into :class:`Link` objects; everything else is kept as is.
    """

    sys: Sys
    fields: dict[str, Any] = Field(default_factory=dict)

    @field_validator("fields", mode="before")
    @classmethod
    def _coerce_links(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        coerced: dict[str, Any] = {}
        for name, field_value in value.items():
            if isinstance(field_value, list):
                coerced[name] = [_coerce_link(item) for item in field_value]
            else:
                coerced[name] = _coerce_link(field_value)
        return coerced

    @property
    def id(self) -> str:
        return self.sys.id

    @property
    def content_type_id(self) -> str | None:
        return self.sys.content_type_id


class DeltaPage(BaseModel):
    """One page of creation and deletion events from the delta source."""

    model_config = ConfigDict(populate_by_name=True)

    assets: list[Asset] = Field(default_factory=list)
    entries: list[Entry] = Field(default_factory=list)
    deleted_asset_ids: list[str] = Field(default_factory=list, alias="deletedAssetIds")
    deleted_entry_ids: list[str] = Field(default_factory=list, alias="deletedEntryIds")

    @property
    def event_count(self) -> int:
        return len(self.assets) + len(self.entries) + len(self.deleted_asset_ids) + len(self.deleted_entry_ids)


class DeltaDocument(BaseModel):
    """A complete delta batch and the token to resume from afterwards."""

    model_config = ConfigDict(populate_by_name=True)

    pages: list[DeltaPage] = Field(default_factory=list)
    sync_token: str | None = Field(default=None, alias="syncToken")
