"""
Confluence Bridge - Aggregator

Concatenates retrieved bodies into the final tool text.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from confluence_bridge.pipeline.models import Content, DetailOutcome

NO_DETAILED_CONTENT: Final[str] = "No detailed content available."


def aggregate(outcomes: Sequence[DetailOutcome]) -> str:
    """Join every retrieved body, in order, each followed by a newline.

    Skipped items contribute nothing. When nothing was retrieved the
    NO_DETAILED_CONTENT sentinel is returned instead of an empty string.

    Args:
        outcomes: Detail outcomes in hit order

    Returns:
        Aggregated text or the sentinel
    """
    combined = "".join(
        f"{outcome.text}\n" for outcome in outcomes if isinstance(outcome, Content)
    )
    return combined or NO_DETAILED_CONTENT
