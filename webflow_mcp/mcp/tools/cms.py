"""CMS collection MCP tools."""

from typing import Any, cast

from ...core.types import ToolResult
from ...core.webflow_client import ProviderFactory
from ..formatting import format_collections
from ..schemas import GetCollectionsInput
from ..validation import validate
from .utils import wrap_response


async def get_collections(arguments: Any, provider_factory: ProviderFactory) -> ToolResult:
    """List the CMS collections of the site identified by ``siteId``."""

    params = cast(GetCollectionsInput, validate("get_collections", arguments))

    async with provider_factory() as provider:
        listing = await provider.list_collections(params.site_id)

    return wrap_response("get_collections", format_collections(listing.collections))
