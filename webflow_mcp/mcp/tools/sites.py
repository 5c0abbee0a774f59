"""Site-related MCP tools."""

from typing import Any, cast

from ...core.exceptions import NotFoundError
from ...core.types import ToolResult
from ...core.webflow_client import ProviderFactory
from ..formatting import format_site, format_sites
from ..schemas import GetSiteInput
from ..validation import validate
from .utils import wrap_response


async def get_site(arguments: Any, provider_factory: ProviderFactory) -> ToolResult:
    """Fetch one site by ``siteId`` and render its details."""

    params = cast(GetSiteInput, validate("get_site", arguments))

    async with provider_factory() as provider:
        site = await provider.get_site(params.site_id)

    if site is None:
        raise NotFoundError("Site not found")
    return wrap_response("get_site", format_site(site))


async def get_sites(arguments: Any, provider_factory: ProviderFactory) -> ToolResult:
    """List every site visible to the configured token."""

    validate("get_sites", arguments)

    async with provider_factory() as provider:
        listing = await provider.list_sites()

    return wrap_response("get_sites", format_sites(listing.sites))
