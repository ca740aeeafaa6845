"""
Confluence Bridge - Query Builder

Turns the raw tool input into a search term, and a search term into a CQL
SearchQuery. Pure functions, no I/O.

The search term is embedded in a double-quoted CQL string literal, so
backslashes and double quotes are escaped before interpolation.
"""

from __future__ import annotations

import re
from typing import Final

from confluence_bridge.core.exceptions import InputValidationError
from confluence_bridge.pipeline.models import SearchQuery

PREFIX: Final[str] = "confluence"

# Leading whitespace, the prefix in any case, then any whitespace
_PREFIX_PATTERN: Final[re.Pattern[str]] = re.compile(rf"^\s*{PREFIX}\s*", re.IGNORECASE)

CONTENT_TYPES: Final[tuple[str, ...]] = (
    "space",
    "user",
    "com.atlassian.confluence.plugins.confluence-questions:question",
    "com.atlassian.confluence.extra.team-calendars:calendar-content-type",
    "com.atlassian.confluence.plugins.confluence-questions:answer",
    "attachment",
    "page",
    "com.atlassian.confluence.extra.team-calendars:space-calendars-view-content-type",
    "blogpost",
)


def has_prefix(raw_input: str) -> bool:
    """Check whether raw input starts with the prefix, ignoring case and leading space."""
    return raw_input.strip().lower().startswith(PREFIX)


def parse_search_term(raw_input: str) -> str:
    """Strip the mandatory ``confluence`` prefix and return the search term.

    Args:
        raw_input: Tool input such as ``"Confluence deployment guide"``

    Returns:
        The trimmed search term

    Raises:
        InputValidationError: If the prefix is missing or nothing follows it
    """
    if not has_prefix(raw_input):
        raise InputValidationError(f"Input must start with '{PREFIX}'")
    term = _PREFIX_PATTERN.sub("", raw_input, count=1).strip()
    if not term:
        raise InputValidationError("Search string is empty")
    return term


def escape_cql(term: str) -> str:
    """Escape a value for use inside a double-quoted CQL string literal."""
    return term.replace("\\", "\\\\").replace('"', '\\"')


def build_query(term: str, limit: int, client_id: str = "next.ui.search") -> SearchQuery:
    """Build the site search query for a term.

    Args:
        term: Non-empty search term
        limit: Maximum number of hits (>= 1)
        client_id: Value sent as the ``src`` parameter

    Returns:
        SearchQuery restricted to the fixed set of content types

    Raises:
        InputValidationError: If term is blank or limit is below 1
    """
    if not term or not term.strip():
        raise InputValidationError("Search term must not be empty")
    if limit < 1:
        raise InputValidationError(f"Result limit must be at least 1, got {limit}")

    types = ",".join(f'"{content_type}"' for content_type in CONTENT_TYPES)
    cql = f'siteSearch ~ "{escape_cql(term)}" AND type in ({types})'
    return SearchQuery(cql=cql, limit=limit, client_id=client_id)
