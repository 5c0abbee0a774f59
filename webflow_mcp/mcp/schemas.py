"""Argument models for each MCP tool."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr

SITE_ID_DESCRIPTION = "The unique identifier of the Webflow site"


class ToolArguments(BaseModel):
    """Base for tool argument models.

    Unknown fields are ignored for every tool rather than rejected.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


class GetSiteInput(ToolArguments):
    site_id: StrictStr = Field(..., alias="siteId", min_length=1, description=SITE_ID_DESCRIPTION)


class GetSitesInput(ToolArguments):
    pass


class TestConnectionInput(ToolArguments):
    # May be omitted (None by default) but an explicit null is a type error.
    message: StrictStr = Field(None, description="A test message to echo back")


class GetCollectionsInput(ToolArguments):
    site_id: StrictStr = Field(..., alias="siteId", min_length=1, description=SITE_ID_DESCRIPTION)
