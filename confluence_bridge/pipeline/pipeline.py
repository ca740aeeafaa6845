"""
Confluence Bridge - Search Pipeline

Composes the stages of one search-and-aggregate run:

1. Parse: strip the ``confluence`` prefix into a search term
2. Build: turn the term into a CQL SearchQuery
3. Search: one search request, classified as Hits / Empty / Failed
4. Fetch: paced, sequential detail requests with per-item isolation
5. Aggregate: join retrieved bodies into the result text

Contract: run() always returns text. Validation problems, search failures
and unexpected exceptions are all rendered as text at this boundary.

Pattern: Pipeline with dependency injection for every stage collaborator.
"""

from __future__ import annotations

from typing import Any, Final

from confluence_bridge.core.exceptions import InputValidationError
from confluence_bridge.core.logging import get_logger
from confluence_bridge.core.tracing import get_tracer
from confluence_bridge.pipeline.aggregator import aggregate
from confluence_bridge.pipeline.models import (
    Content,
    Credentials,
    Empty,
    Failed,
    SearchQuery,
)
from confluence_bridge.pipeline.protocols import DetailFetcherProtocol, SearchClientProtocol
from confluence_bridge.pipeline.query_builder import build_query, parse_search_term

logger = get_logger(__name__)

# =============================================================================
# Result texts
# =============================================================================

INVALID_INPUT_MESSAGE: Final[str] = (
    "Invalid input. Please provide both a search string and a bearer token."
)
NO_RESULTS: Final[str] = "No results found."
SEARCH_FAILED_TEMPLATE: Final[str] = "Search request failed: {status}, message: {message}"
ERROR_TEMPLATE: Final[str] = "Error during confluence search: {error}"


class SearchPipeline:
    """Runs one Confluence search and aggregates the retrieved content.

    Holds no per-run state, so one instance can serve concurrent runs.
    """

    def __init__(
        self,
        search_client: SearchClientProtocol,
        detail_fetcher: DetailFetcherProtocol,
        client_id: str = "next.ui.search",
        tracer: Any | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            search_client: Issues the search request
            detail_fetcher: Retrieves content bodies for hits
            client_id: Value sent as the ``src`` search parameter
            tracer: OpenTelemetry tracer, module tracer when omitted
        """
        self._search_client = search_client
        self._detail_fetcher = detail_fetcher
        self._client_id = client_id
        self._tracer = tracer if tracer is not None else get_tracer(__name__)

    async def run(
        self,
        raw_input: str,
        credentials: Credentials | None,
        limit: int,
    ) -> str:
        """Execute the pipeline for one tool invocation.

        Args:
            raw_input: Tool input, must start with ``confluence``
            credentials: Bearer credential, None when not configured
            limit: Maximum number of search hits to retrieve

        Returns:
            Aggregated content, a sentinel, or an error text
        """
        with self._tracer.start_as_current_span("confluence_search.run") as span:
            try:
                term = parse_search_term(raw_input)
                if credentials is None:
                    raise InputValidationError("Bearer token is not configured")
                query = build_query(term, limit, client_id=self._client_id)
            except InputValidationError as e:
                logger.warning("invalid_input", reason=str(e))
                span.set_attribute("confluence.outcome", "invalid_input")
                return INVALID_INPUT_MESSAGE

            try:
                return await self._execute(query, credentials, span)
            except Exception as e:
                logger.exception("pipeline_error", error=str(e))
                span.set_attribute("confluence.outcome", "error")
                return ERROR_TEMPLATE.format(error=e)

    async def _execute(self, query: SearchQuery, credentials: Credentials, span: Any) -> str:
        with self._tracer.start_as_current_span("search"):
            outcome = await self._search_client.search(query, credentials)

        if isinstance(outcome, Failed):
            span.set_attribute("confluence.outcome", "search_failed")
            span.set_attribute("http.status_code", outcome.status)
            return SEARCH_FAILED_TEMPLATE.format(
                status=outcome.status,
                message=outcome.message,
            )

        if isinstance(outcome, Empty):
            span.set_attribute("confluence.outcome", "no_results")
            return NO_RESULTS

        with self._tracer.start_as_current_span("fetch_details") as fetch_span:
            details = await self._detail_fetcher.fetch_all(outcome.hits, credentials)
            retrieved = sum(1 for detail in details if isinstance(detail, Content))
            fetch_span.set_attribute("confluence.hits", len(outcome.hits))
            fetch_span.set_attribute("confluence.skipped", len(details) - retrieved)

        logger.info(
            "pipeline_completed",
            hits=len(outcome.hits),
            retrieved=retrieved,
        )
        span.set_attribute("confluence.outcome", "aggregated")
        return aggregate(details)
