"""Confluence Bridge: search-and-aggregate tool for calling agents.

This package exposes a single tool, ``confluence-search``, that:
- Builds a CQL query from a prefixed search string
- Runs a Confluence site search
- Fetches each hit's rendered body, one request at a time
- Aggregates the bodies into one text result

The tool is served over MCP (stdio) and over a small FastAPI surface.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
