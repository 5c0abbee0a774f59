"""Shared type definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping


def freeze(value: Any) -> Any:
    """Recursively turn dicts into read-only mappings and lists into tuples."""

    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a fresh JSON-style copy (dicts and lists) of a frozen value."""

    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


@dataclass(slots=True, frozen=True)
class ToolDescriptor:
    """Advertised description of a tool: name, purpose and argument schema.

    ``input_schema`` is read-only all the way down; use :meth:`json_schema`
    for a mutable copy to hand to serializers.
    """

    name: str
    description: str
    input_schema: Mapping[str, Any]

    def json_schema(self) -> dict[str, Any]:
        return thaw(self.input_schema)


@dataclass(slots=True, frozen=True)
class TextContent:
    """A single text block of a tool result."""

    text: str
    type: Literal["text"] = "text"


@dataclass(slots=True, frozen=True)
class ToolResult:
    """Ordered content blocks returned by a successful tool call."""

    content: tuple[TextContent, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """Concatenated text of all blocks, mainly for logging and tests."""

        return "\n".join(block.text for block in self.content)
