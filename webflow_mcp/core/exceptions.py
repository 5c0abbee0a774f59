"""Custom exception hierarchy for the Webflow MCP server."""

from __future__ import annotations

from collections.abc import Iterable


class WebflowMCPError(Exception):
    """Base exception for server-level issues."""


class ConfigurationError(WebflowMCPError):
    """Raised when configuration is invalid or missing."""


class StartupError(ConfigurationError):
    """Raised when the process cannot start, e.g. the API token is missing."""


class ToolError(WebflowMCPError):
    """Base class for failures attributable to a single tool call."""


class UnknownToolError(ToolError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ValidationError(ToolError):
    """Raised when tool arguments do not satisfy the declared input schema."""

    def __init__(self, tool_name: str, violations: Iterable[str]) -> None:
        self.tool_name = tool_name
        self.violations = tuple(violations)
        detail = "; ".join(self.violations) or "invalid arguments"
        super().__init__(f"Invalid arguments for {tool_name}: {detail}")


class NotFoundError(ToolError):
    """Raised when a single-entity lookup returns no record."""


class ProviderError(WebflowMCPError):
    """Raised when the Webflow API responds with an error or cannot be reached."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class RateLimitExceeded(ProviderError):
    """Raised when the Webflow API reports rate limiting."""
