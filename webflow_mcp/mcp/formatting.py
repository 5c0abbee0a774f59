"""Plain-text rendering of Webflow records for tool responses."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from ..core.models import Collection, Site
from ..core.types import TextContent

NOT_AVAILABLE = "N/A"
NO_SITES_MESSAGE = "No sites found for this account."
NO_COLLECTIONS_MESSAGE = "No collections found for this site."


def format_date(value: datetime | None) -> str:
    """Render a timestamp in UTC, or ``N/A`` when absent."""

    if value is None:
        return NOT_AVAILABLE
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def _or_na(value: str | None) -> str:
    return value or NOT_AVAILABLE


def format_site(site: Site) -> TextContent:
    lines = [
        "• Site Details:",
        f"  ID: {site.id}",
        f"  Display Name: {site.display_name}",
        f"  Short Name: {site.short_name}",
        "",
        "- Workspace Information:",
        f"  Workspace ID: {site.workspace_id}",
        "",
        "- Dates:",
        f"  Created On: {format_date(site.created_on)}",
        f"  Last Published: {format_date(site.last_published)}",
        "",
        "- URLs:",
        f"  Preview URL: {_or_na(site.preview_url)}",
    ]
    return TextContent(text="\n".join(lines))


def _site_summary(site: Site) -> str:
    return "\n".join(
        [
            f"• Site: {site.display_name}",
            f"  - ID: {site.id}",
            f"  - Workspace: {site.workspace_id}",
            f"  - Created: {format_date(site.created_on)}",
            f"  - Last Published: {format_date(site.last_published)}",
            f"  - Preview URL: {_or_na(site.preview_url)}",
        ]
    )


def _collection_summary(collection: Collection) -> str:
    return "\n".join(
        [
            f"• Collection: {collection.display_name}",
            f"  - ID: {collection.id}",
            f"  - Slug: {collection.slug}",
            f"  - Created: {format_date(collection.created_on)}",
            f"  - Last Updated: {format_date(collection.last_updated)}",
        ]
    )


def format_sites(sites: Sequence[Site]) -> TextContent:
    """List sites in provider order, or a dedicated message when there are none."""

    if not sites:
        return TextContent(text=NO_SITES_MESSAGE)
    blocks = "\n\n".join(_site_summary(site) for site in sites)
    return TextContent(text=f"Found {len(sites)} sites:\n\n{blocks}")


def format_collections(collections: Sequence[Collection]) -> TextContent:
    """List collections in provider order, or a dedicated message when there are none."""

    if not collections:
        return TextContent(text=NO_COLLECTIONS_MESSAGE)
    blocks = "\n\n".join(_collection_summary(collection) for collection in collections)
    return TextContent(text=f"Found {len(collections)} collections:\n\n{blocks}")
