"""
Confluence Bridge - confluence-search Tool

Wires settings, the HTTP client and the pipeline stages together for one
invocation, then registers the tool.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from confluence_bridge.core.config import Settings, get_settings
from confluence_bridge.core.exceptions import ConfigurationError
from confluence_bridge.core.logging import get_logger
from confluence_bridge.pipeline.detail_fetcher import DetailFetcher
from confluence_bridge.pipeline.pacing import SleeperProtocol
from confluence_bridge.pipeline.pipeline import (
    ERROR_TEMPLATE,
    INVALID_INPUT_MESSAGE,
    SearchPipeline,
)
from confluence_bridge.pipeline.search_client import SearchClient
from confluence_bridge.tools.models import ConfluenceSearchInput, ToolOutput
from confluence_bridge.tools.registry import ToolContext, ToolSpec, register_tool

logger = get_logger(__name__)

TOOL_NAME = "confluence-search"
TOOL_DESCRIPTION = (
    "Search Confluence using a search string. Input must start with 'confluence' "
    "(case-insensitive) followed by the search string."
)


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the pooled client for the configured Confluence server.

    Raises:
        ConfigurationError: If base_url is not an http(s) URL
    """
    if not settings.base_url.startswith(("http://", "https://")):
        raise ConfigurationError(f"Invalid Confluence base_url: {settings.base_url!r}")
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.request_timeout),
    )


def build_pipeline(
    http_client: httpx.AsyncClient,
    settings: Settings,
    sleeper: SleeperProtocol | None = None,
) -> SearchPipeline:
    """Assemble the pipeline stages on top of a shared client."""
    return SearchPipeline(
        search_client=SearchClient(http_client, search_path=settings.search_path),
        detail_fetcher=DetailFetcher(
            http_client,
            sleeper=sleeper,
            pacing_interval=settings.pacing_interval,
            content_path=settings.content_path,
        ),
        client_id=settings.client_id,
    )


async def confluence_search(params: ConfluenceSearchInput, context: ToolContext) -> ToolOutput:
    """Handle one confluence-search invocation.

    Settings are resolved once here, per invocation, and passed explicitly
    into the pipeline.
    """
    try:
        settings = context.settings if context.settings is not None else get_settings()
    except ValidationError as e:
        logger.error("tool_misconfigured", tool=TOOL_NAME, error=str(e))
        return ToolOutput.from_text(ERROR_TEMPLATE.format(error=e))

    credentials = settings.credentials()
    logger.info("tool_invoked", tool=TOOL_NAME, has_credentials=credentials is not None)

    if context.http_client is not None:
        pipeline = build_pipeline(context.http_client, settings, context.sleeper)
        text = await pipeline.run(params.state, credentials, settings.limit)
        return ToolOutput.from_text(text)

    try:
        http_client = build_http_client(settings)
    except ConfigurationError as e:
        logger.error("tool_misconfigured", tool=TOOL_NAME, error=str(e))
        return ToolOutput.from_text(ERROR_TEMPLATE.format(error=e))

    async with http_client:
        pipeline = build_pipeline(http_client, settings, context.sleeper)
        text = await pipeline.run(params.state, credentials, settings.limit)

    return ToolOutput.from_text(text)


CONFLUENCE_SEARCH_TOOL = register_tool(
    ToolSpec(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        input_model=ConfluenceSearchInput,
        handler=confluence_search,
        invalid_input_message=INVALID_INPUT_MESSAGE,
    )
)
