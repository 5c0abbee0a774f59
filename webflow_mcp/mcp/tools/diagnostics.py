"""Connectivity check tool."""

import json
from typing import Any

from ...core.types import TextContent, ToolResult
from ...core.webflow_client import ProviderFactory
from ..validation import validate
from .utils import wrap_response


async def test_connection(arguments: Any, provider_factory: ProviderFactory) -> ToolResult:
    """Echo the received arguments back without contacting Webflow."""

    validate("test_connection", arguments)
    echoed = json.dumps(dict(arguments or {}), ensure_ascii=False, separators=(",", ":"), default=str)
    return wrap_response(
        "test_connection",
        TextContent(text=f"Connection test successful! Args received: {echoed}"),
    )
