"""
Confluence Bridge - Tool Input/Output Records

Pydantic models for the tool contract shared by the MCP server and the HTTP API.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from confluence_bridge.pipeline.query_builder import PREFIX, has_prefix


class ConfluenceSearchInput(BaseModel):
    """Input record for the confluence-search tool."""

    state: str = Field(
        ...,
        description=(
            "Search request starting with 'confluence' (case-insensitive), "
            "followed by the search string"
        ),
    )

    @field_validator("state")
    @classmethod
    def must_start_with_prefix(cls, value: str) -> str:
        if not has_prefix(value):
            raise ValueError(f"Input must start with '{PREFIX}'")
        return value


class TextContent(BaseModel):
    """A single text block of tool output."""

    type: Literal["text"] = "text"
    text: str


class ToolOutput(BaseModel):
    """Output record: always exactly one text block."""

    content: list[TextContent] = Field(..., min_length=1, max_length=1)

    @classmethod
    def from_text(cls, text: str) -> ToolOutput:
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return self.content[0].text
