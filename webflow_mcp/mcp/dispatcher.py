"""Route tool calls by name to their handlers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.exceptions import UnknownToolError
from ..core.logging_config import get_logger
from ..core.types import ToolDescriptor, ToolResult
from ..core.webflow_client import ProviderFactory
from .registry import ToolRegistry, registry as default_registry
from .tools import TOOL_HANDLERS, ToolHandler

logger = get_logger(__name__)


class ToolDispatcher:
    """Name to handler lookup with pass-through invocation.

    The dispatcher holds no per-call state; the provider factory is called by
    each handler so concurrent calls never share a client. Handler failures
    propagate unchanged.
    """

    def __init__(
        self,
        provider_factory: ProviderFactory,
        *,
        handlers: Mapping[str, ToolHandler] = TOOL_HANDLERS,
        registry: ToolRegistry = default_registry,
    ) -> None:
        missing = set(registry.names()) - set(handlers)
        orphaned = set(handlers) - set(registry.names())
        if missing or orphaned:
            raise ValueError(
                f"Tool handlers diverge from registry: missing={sorted(missing)} "
                f"orphaned={sorted(orphaned)}"
            )
        self._provider_factory = provider_factory
        self._handlers = dict(handlers)
        self._registry = registry

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return self._registry.list_tools()

    async def call_tool(self, name: str, arguments: Any = None) -> ToolResult:
        """Execute a tool by name with raw arguments."""

        handler = self._handlers.get(name)
        if handler is None:
            logger.warning("mcp_unknown_tool", name=name)
            raise UnknownToolError(name)

        logger.debug("mcp_tool_call", name=name, arguments=arguments)
        return await handler(arguments, self._provider_factory)
