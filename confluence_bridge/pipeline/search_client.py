"""
Confluence Bridge - Search Client

Issues one CQL search against the Confluence REST API and classifies the
response as Hits, Empty or Failed.

Patterns Applied:
- Connection pooling: the httpx.AsyncClient is injected and shared, never
  created per request
- Protocol for duck typing (see protocols.py) so FakeSearchClient can replace
  it in pipeline tests

A non-success status is data (Failed), not an exception. Transport and JSON
decode errors propagate to the pipeline boundary.
"""

from __future__ import annotations

from typing import Any

import httpx

from confluence_bridge.core.logging import get_logger
from confluence_bridge.pipeline.models import (
    Credentials,
    Empty,
    Failed,
    Hits,
    SearchHit,
    SearchOutcome,
    SearchQuery,
)

logger = get_logger(__name__)

DEFAULT_SEARCH_PATH = "/rest/api/search"


class SearchClient:
    """HTTP client for the Confluence search endpoint.

    Attributes:
        search_path: Path of the search endpoint relative to the client's base_url
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        search_path: str = DEFAULT_SEARCH_PATH,
    ) -> None:
        self._client = http_client
        self.search_path = search_path

    async def search(self, query: SearchQuery, credentials: Credentials) -> SearchOutcome:
        """Run the search. Exactly one request, no retry.

        Args:
            query: CQL query and paging parameters
            credentials: Bearer credential

        Returns:
            Failed on non-2xx, Empty on zero results, Hits otherwise
        """
        response = await self._client.get(
            self.search_path,
            params=query.to_params(),
            headers=credentials.headers(),
        )

        if not response.is_success:
            logger.error(
                "search_request_failed",
                status=response.status_code,
                message=response.text,
            )
            return Failed(status=response.status_code, message=response.text)

        payload: dict[str, Any] = response.json()
        results = payload.get("results") or []
        if not results:
            logger.info("search_empty")
            return Empty()

        hits = self._parse_hits(results)
        logger.info("search_completed", results=len(results), hits=len(hits))
        return Hits(hits=hits)

    def _parse_hits(self, results: list[Any]) -> tuple[SearchHit, ...]:
        """Keep results carrying a content id, preserving order."""
        hits: list[SearchHit] = []
        for item in results:
            content = item.get("content") if isinstance(item, dict) else None
            if not isinstance(content, dict):
                continue
            content_id = content.get("id")
            if not content_id:
                continue
            hits.append(SearchHit(content_id=str(content_id)))
        return tuple(hits)
