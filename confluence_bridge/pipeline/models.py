"""
Confluence Bridge - Pipeline Data Models

Typed values flowing through one search-and-aggregate run. Outcomes are
encoded as data so that per-item skips and whole-run aborts are visible in
the types rather than in exception handling.

Pattern: frozen dataclasses with slots, union type aliases for outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, TypeAlias

# =============================================================================
# Constants
# =============================================================================

EXCERPT_MODE: Final[str] = "highlight"
SEARCH_EXPAND: Final[str] = "space.icon"
DETAIL_EXPAND: Final[str] = "space,body.view,version,container"
EMPTY_CONTENT_REASON: Final[str] = "empty content"


# =============================================================================
# Request-side values
# =============================================================================


@dataclass(frozen=True, slots=True)
class Credentials:
    """Bearer credential used for every Confluence request of one run."""

    bearer_token: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        """Request headers carrying the credential."""
        return {
            "Authorization": f"Bearer {self.bearer_token}",
            "Accept": "application/json",
        }


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """An immutable CQL search request.

    Attributes:
        cql: CQL expression embedding the escaped search term
        limit: Maximum number of hits to request (>= 1)
        start: Pagination offset, always 0
        client_id: Value of the ``src`` parameter
    """

    cql: str
    limit: int
    start: int = 0
    client_id: str = "next.ui.search"
    excerpt: str = EXCERPT_MODE
    expand: str = SEARCH_EXPAND
    include_archived_spaces: bool = False

    def to_params(self) -> dict[str, str]:
        """Render the query string parameters of the search request."""
        return {
            "cql": self.cql,
            "start": str(self.start),
            "limit": str(self.limit),
            "excerpt": self.excerpt,
            "expand": self.expand,
            "includeArchivedSpaces": str(self.include_archived_spaces).lower(),
            "src": self.client_id,
        }


@dataclass(frozen=True, slots=True)
class SearchHit:
    """A search result reference, prior to detail retrieval."""

    content_id: str


# =============================================================================
# Search outcomes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hits:
    """Successful search with results, in backend order."""

    hits: tuple[SearchHit, ...]


@dataclass(frozen=True, slots=True)
class Empty:
    """Successful search that matched nothing."""


@dataclass(frozen=True, slots=True)
class Failed:
    """Search endpoint answered with a non-success status."""

    status: int
    message: str


SearchOutcome: TypeAlias = Hits | Empty | Failed


# =============================================================================
# Detail outcomes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Content:
    """Rendered body retrieved for one hit."""

    content_id: str
    text: str


@dataclass(frozen=True, slots=True)
class SkippedFailure:
    """Detail retrieval failed for one hit; the run continues without it.

    Attributes:
        content_id: Identifier of the hit that was skipped
        status: HTTP status, or None for transport errors and empty bodies
        message: Backend message or failure reason
    """

    content_id: str
    status: int | None
    message: str


DetailOutcome: TypeAlias = Content | SkippedFailure
