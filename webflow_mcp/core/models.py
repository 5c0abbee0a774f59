"""Pydantic projections of Webflow Data API records."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WebflowRecord(BaseModel):
    """Read-only record parsed from camelCase Webflow JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class CustomDomain(WebflowRecord):
    id: str
    url: str
    last_published: datetime | None = None


class Site(WebflowRecord):
    """A Webflow site as returned by ``GET /sites`` and ``GET /sites/{id}``."""

    id: str
    display_name: str
    short_name: str
    workspace_id: str
    created_on: datetime | None = None
    last_published: datetime | None = None
    last_updated: datetime | None = None
    preview_url: str | None = None
    time_zone: str | None = None
    custom_domains: tuple[CustomDomain, ...] = ()


class Collection(WebflowRecord):
    """A CMS collection summary as returned by ``GET /sites/{id}/collections``."""

    id: str
    display_name: str
    slug: str
    singular_name: str | None = None
    created_on: datetime | None = None
    last_updated: datetime | None = None


class SiteList(WebflowRecord):
    sites: tuple[Site, ...] = Field(default_factory=tuple)

    @field_validator("sites", mode="before")
    @classmethod
    def _coerce_sites(cls, value: Any) -> Any:
        # Anything that is not an array is treated as "no records".
        return value if isinstance(value, (list, tuple)) else []


class CollectionList(WebflowRecord):
    collections: tuple[Collection, ...] = Field(default_factory=tuple)

    @field_validator("collections", mode="before")
    @classmethod
    def _coerce_collections(cls, value: Any) -> Any:
        return value if isinstance(value, (list, tuple)) else []
