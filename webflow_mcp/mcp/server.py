"""FastMCP server configuration and lifecycle helpers."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError as FastMCPToolError
from fastmcp.tools.tool import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent as MCPTextContent
from pydantic import PrivateAttr

from ..core.config import RuntimeSettings, WebflowSettings
from ..core.exceptions import WebflowMCPError
from ..core.logging_config import get_logger
from ..core.types import ToolResult
from ..core.webflow_client import ProviderFactory, webflow_client_factory
from .dispatcher import ToolDispatcher

logger = get_logger(__name__)

SERVER_NAME = "webflow-mcp-server"
SERVER_VERSION = "1.0.0"


def to_mcp_result(result: ToolResult) -> MCPToolResult:
    """Convert a core ToolResult into FastMCP content blocks."""

    return MCPToolResult(
        content=[MCPTextContent(type="text", text=block.text) for block in result.content]
    )


class DispatchedTool(Tool):
    """FastMCP tool whose schema and execution come from a ToolDispatcher."""

    _dispatcher: ToolDispatcher = PrivateAttr()

    @classmethod
    def bind(cls, dispatcher: ToolDispatcher, name: str) -> DispatchedTool:
        descriptor = next(d for d in dispatcher.list_tools() if d.name == name)
        tool = cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.json_schema(),
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        try:
            result = await self._dispatcher.call_tool(self.name, arguments)
        except WebflowMCPError as exc:
            logger.warning(
                "mcp_tool_failed",
                name=self.name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise FastMCPToolError(str(exc)) from exc
        return to_mcp_result(result)


def build_server(dispatcher: ToolDispatcher) -> FastMCP:
    """Create a FastMCP server advertising every dispatcher tool."""

    server = FastMCP(SERVER_NAME)
    for descriptor in dispatcher.list_tools():
        server.add_tool(DispatchedTool.bind(dispatcher, descriptor.name))
    logger.info(
        "mcp_tools_registered",
        server=SERVER_NAME,
        version=SERVER_VERSION,
        count=len(dispatcher.list_tools()),
    )
    return server


def create_server(
    settings: WebflowSettings,
    provider_factory: ProviderFactory | None = None,
) -> FastMCP:
    """Wire settings into a dispatcher and wrap it in a FastMCP server."""

    factory = provider_factory or webflow_client_factory(settings)
    return build_server(ToolDispatcher(factory))


def run_server(server: FastMCP, settings: RuntimeSettings) -> None:
    """Serve requests on the configured transport until interrupted."""

    logger.info("mcp_server_starting", transport=settings.mcp_transport)
    if settings.mcp_transport == "stdio":
        server.run(transport="stdio")
    else:
        server.run(
            transport=settings.mcp_transport,
            host=settings.mcp_host,
            port=settings.mcp_port,
        )
