"""Shared helpers for MCP tool implementations."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ...core.logging_config import get_logger
from ...core.types import TextContent, ToolResult
from ...core.webflow_client import ProviderFactory

logger = get_logger(__name__)

ToolHandler = Callable[[Any, ProviderFactory], Awaitable[ToolResult]]


def wrap_response(tool_name: str, *blocks: TextContent) -> ToolResult:
    """Package formatted blocks into a ToolResult and log the completion."""

    result = ToolResult(content=tuple(blocks))
    logger.info(
        "tool_call_completed",
        tool=tool_name,
        blocks=len(result.content),
        chars=sum(len(block.text) for block in result.content),
    )
    return result
