"""
Fake pipeline collaborators for unit testing.

Each fake implements the matching protocol without real HTTP or real waiting
and records what it was asked to do.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from confluence_bridge.pipeline.models import (
    Content,
    Credentials,
    DetailOutcome,
    Empty,
    SearchHit,
    SearchOutcome,
    SearchQuery,
    SkippedFailure,
)


class FakeSleeper:
    """Sleeper that advances a virtual monotonic clock instead of waiting."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self.calls: list[float] = []

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(0)
        self.calls.append(seconds)
        self.now += seconds

    def monotonic(self) -> float:
        """Current virtual time."""
        return self.now


class FakeSearchClient:
    """Returns a preset SearchOutcome and records every query."""

    def __init__(self, outcome: SearchOutcome | None = None) -> None:
        self._outcome: SearchOutcome = outcome if outcome is not None else Empty()
        self.queries: list[SearchQuery] = []

    async def search(
        self,
        query: SearchQuery,
        credentials: Credentials,  # noqa: ARG002
    ) -> SearchOutcome:
        await asyncio.sleep(0)
        self.queries.append(query)
        return self._outcome

    def set_outcome(self, outcome: SearchOutcome) -> None:
        self._outcome = outcome


class FakeDetailFetcher:
    """Serves bodies from a content_id -> text mapping.

    Ids missing from the mapping come back as 404 SkippedFailure.
    """

    def __init__(self, bodies: dict[str, str] | None = None) -> None:
        self._bodies = bodies or {}
        self.requested: list[str] = []

    async def fetch_all(
        self,
        hits: Sequence[SearchHit],
        credentials: Credentials,  # noqa: ARG002
    ) -> list[DetailOutcome]:
        await asyncio.sleep(0)
        outcomes: list[DetailOutcome] = []
        for hit in hits:
            self.requested.append(hit.content_id)
            text = self._bodies.get(hit.content_id)
            if text is None:
                outcomes.append(SkippedFailure(hit.content_id, 404, "Not Found"))
            else:
                outcomes.append(Content(hit.content_id, text))
        return outcomes
