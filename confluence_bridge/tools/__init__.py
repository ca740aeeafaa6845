"""Tool registry and tool implementations.

Importing this package registers every tool in TOOL_REGISTRY.
"""

from confluence_bridge.tools import confluence_search  # noqa: F401 - registers the tool
from confluence_bridge.tools.models import ConfluenceSearchInput, TextContent, ToolOutput
from confluence_bridge.tools.registry import (
    TOOL_REGISTRY,
    ToolContext,
    ToolSpec,
    get_tool,
    invoke_tool,
)

__all__ = [
    "TOOL_REGISTRY",
    "ConfluenceSearchInput",
    "TextContent",
    "ToolContext",
    "ToolOutput",
    "ToolSpec",
    "get_tool",
    "invoke_tool",
]
