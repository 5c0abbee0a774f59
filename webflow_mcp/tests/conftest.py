from __future__ import annotations

from typing import Any

import pytest

from webflow_mcp.core.config import RuntimeSettings, WebflowSettings
from webflow_mcp.core.models import Collection, CollectionList, Site, SiteList
from webflow_mcp.mcp.dispatcher import ToolDispatcher


class FakeProvider:
    """In-memory stand-in for WebflowClient that records every call."""

    def __init__(
        self,
        *,
        sites: list[Site] | None = None,
        collections: list[Collection] | None = None,
    ) -> None:
        self.sites = sites or []
        self.collections = collections or []
        self.calls: list[tuple[str, Any]] = []
        self.opened = 0
        self.closed = 0

    async def __aenter__(self) -> FakeProvider:
        self.opened += 1
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed += 1

    async def get_site(self, site_id: str) -> Site | None:
        self.calls.append(("get_site", site_id))
        return next((site for site in self.sites if site.id == site_id), None)

    async def list_sites(self) -> SiteList:
        self.calls.append(("list_sites", None))
        return SiteList(sites=tuple(self.sites))

    async def list_collections(self, site_id: str) -> CollectionList:
        self.calls.append(("list_collections", site_id))
        return CollectionList(collections=tuple(self.collections))


def make_site(site_id: str = "site-1", **overrides: Any) -> Site:
    payload: dict[str, Any] = {
        "id": site_id,
        "displayName": f"Site {site_id}",
        "shortName": site_id,
        "workspaceId": "ws-1",
        "createdOn": "2024-01-02T03:04:05.000Z",
        "lastPublished": "2024-02-03T04:05:06.000Z",
        "previewUrl": f"https://screenshots.webflow.com/{site_id}.png",
    }
    payload.update(overrides)
    return Site.model_validate(payload)


def make_collection(collection_id: str = "col-1", **overrides: Any) -> Collection:
    payload: dict[str, Any] = {
        "id": collection_id,
        "displayName": f"Collection {collection_id}",
        "slug": collection_id,
        "createdOn": "2024-03-01T00:00:00Z",
        "lastUpdated": "2024-03-02T12:30:00Z",
    }
    payload.update(overrides)
    return Collection.model_validate(payload)


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def dispatcher(fake_provider: FakeProvider) -> ToolDispatcher:
    return ToolDispatcher(lambda: fake_provider)



@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Hide the developer's environment and .env files from settings classes."""

    monkeypatch.chdir(tmp_path)
    for name in (
        "WEBFLOW_API_TOKEN",
        "WEBFLOW_API_KEY",
        "WEBFLOW_API_BASE",
        "WEBFLOW_HTTP_TIMEOUT",
        "MCP_TRANSPORT",
        "MCP_HOST",
        "MCP_PORT",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    for settings_cls in (RuntimeSettings, WebflowSettings):
        monkeypatch.setitem(settings_cls.model_config, "env_file", (str(tmp_path / ".env"),))
    return tmp_path
