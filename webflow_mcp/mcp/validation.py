"""Argument validation for tool calls.

Each tool name maps to exactly one pydantic argument model (see
:mod:`webflow_mcp.mcp.registry`). Raw arguments are checked against that model
and either come back as a typed instance or fail with
:class:`~webflow_mcp.core.exceptions.ValidationError` listing every violated
constraint. Unknown extra fields are ignored for every tool. Validation never
talks to Webflow.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from ..core.exceptions import UnknownToolError, ValidationError
from .registry import registry

ModelT = TypeVar("ModelT", bound=BaseModel)

_MESSAGES: dict[str, str] = {
    "missing": "missing required field",
    "string_type": "wrong type, expected string",
    "string_too_short": "empty string where non-empty required",
}


def _describe(error: ErrorDetails) -> str:
    field = ".".join(str(part) for part in error["loc"]) or "arguments"
    message = _MESSAGES.get(error["type"], error["msg"])
    return f"{field}: {message}"


def parse_arguments(tool_name: str, model: type[ModelT], arguments: Any) -> ModelT:
    """Validate ``arguments`` against ``model`` on behalf of ``tool_name``."""

    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ValidationError(tool_name, ["arguments: expected an object"])

    try:
        return model.model_validate(dict(arguments))
    except PydanticValidationError as exc:
        raise ValidationError(tool_name, [_describe(error) for error in exc.errors()]) from exc


def validate(tool_name: str, arguments: Any) -> BaseModel:
    """Validate raw arguments for a registered tool."""

    model = registry.model_for(tool_name)
    if model is None:
        raise UnknownToolError(tool_name)
    return parse_arguments(tool_name, model, arguments)
