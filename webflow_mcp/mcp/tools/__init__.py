"""Tool handlers keyed by tool name."""

from types import MappingProxyType

from .cms import get_collections
from .diagnostics import test_connection
from .sites import get_site, get_sites
from .utils import ToolHandler

TOOL_HANDLERS: MappingProxyType[str, ToolHandler] = MappingProxyType(
    {
        "get_site": get_site,
        "get_sites": get_sites,
        "test_connection": test_connection,
        "get_collections": get_collections,
    }
)

__all__ = ["TOOL_HANDLERS", "ToolHandler", "get_collections", "get_site", "get_sites", "test_connection"]
