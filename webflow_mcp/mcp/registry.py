"""Static registry of the tools this server advertises."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from ..core.types import ToolDescriptor, freeze
from .schemas import GetCollectionsInput, GetSiteInput, GetSitesInput, TestConnectionInput

_KEPT_PROPERTY_KEYS = ("type", "description", "minLength")


def input_schema_for(model: type[BaseModel]) -> dict[str, Any]:
    """Project a pydantic model's JSON schema onto the MCP ``inputSchema`` shape."""

    schema = model.model_json_schema(by_alias=True)
    properties: dict[str, Any] = {}
    for name, prop in schema.get("properties", {}).items():
        # Optional fields come out as anyOf[<type>, null]; advertise the type.
        variants = [v for v in prop.get("anyOf", [prop]) if v.get("type") != "null"]
        merged = {**prop, **(variants[0] if variants else {})}
        properties[name] = {key: merged[key] for key in _KEPT_PROPERTY_KEYS if key in merged}

    return {
        "type": "object",
        "properties": properties,
        "required": list(schema.get("required", [])),
    }


class ToolRegistry:
    """Ordered, name-unique collection of tool descriptors and argument models."""

    def __init__(self) -> None:
        self._descriptors: dict[str, ToolDescriptor] = {}
        self._models: dict[str, type[BaseModel]] = {}

    def register(self, name: str, description: str, model: type[BaseModel]) -> ToolDescriptor:
        if name in self._descriptors:
            raise ValueError(f"Tool '{name}' already registered")
        descriptor = ToolDescriptor(
            name=name,
            description=description,
            input_schema=freeze(input_schema_for(model)),
        )
        self._descriptors[name] = descriptor
        self._models[name] = model
        return descriptor

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return tuple(self._descriptors.values())

    def names(self) -> tuple[str, ...]:
        return tuple(self._descriptors)

    def model_for(self, name: str) -> type[BaseModel] | None:
        return self._models.get(name)


registry = ToolRegistry()

registry.register(
    "get_site",
    "Retrieve detailed information about a specific Webflow site by ID, including "
    "workspace, creation date, display name, and publishing details",
    GetSiteInput,
)
registry.register(
    "get_sites",
    "Retrieve a list of all Webflow sites accessible to the authenticated user",
    GetSitesInput,
)
registry.register(
    "test_connection",
    "A simple test tool to verify MCP connection is working",
    TestConnectionInput,
)
registry.register(
    "get_collections",
    "Retrieve a list of all CMS collections for a specific Webflow site",
    GetCollectionsInput,
)


def list_tools() -> tuple[ToolDescriptor, ...]:
    """Return every registered tool in declaration order."""

    return registry.list_tools()
