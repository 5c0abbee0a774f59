"""MCP tool registry, validation, dispatch and transport."""

from .dispatcher import ToolDispatcher
from .registry import ToolRegistry, list_tools
from .validation import validate

__all__ = ["ToolDispatcher", "ToolRegistry", "list_tools", "validate"]
