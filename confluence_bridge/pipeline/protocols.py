"""
Confluence Bridge - Pipeline Protocols

Protocols for duck typing in tests (FakeSearchClient / FakeDetailFetcher).

Pattern: Repository Pattern + FakeClient
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from confluence_bridge.pipeline.models import (
        Credentials,
        DetailOutcome,
        SearchHit,
        SearchOutcome,
        SearchQuery,
    )


@runtime_checkable
class SearchClientProtocol(Protocol):
    """Protocol for SearchClient duck typing."""

    async def search(self, query: SearchQuery, credentials: Credentials) -> SearchOutcome:
        """Run one search and classify the response."""
        ...


@runtime_checkable
class DetailFetcherProtocol(Protocol):
    """Protocol for DetailFetcher duck typing."""

    async def fetch_all(
        self,
        hits: Sequence[SearchHit],
        credentials: Credentials,
    ) -> list[DetailOutcome]:
        """Fetch every hit, in order, isolating per-item failures."""
        ...
