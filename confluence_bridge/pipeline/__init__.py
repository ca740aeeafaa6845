"""Search-and-aggregate pipeline.

Stages:
- query_builder: prefix stripping and CQL construction
- search_client: one search request, classified as Hits / Empty / Failed
- detail_fetcher: paced, sequential body retrieval with per-item isolation
- aggregator: newline-terminated concatenation with an empty sentinel
- pipeline: orchestration and the always-text contract
"""

from confluence_bridge.pipeline.aggregator import NO_DETAILED_CONTENT, aggregate
from confluence_bridge.pipeline.detail_fetcher import DetailFetcher
from confluence_bridge.pipeline.pipeline import (
    INVALID_INPUT_MESSAGE,
    NO_RESULTS,
    SearchPipeline,
)
from confluence_bridge.pipeline.search_client import SearchClient

__all__ = [
    "INVALID_INPUT_MESSAGE",
    "NO_DETAILED_CONTENT",
    "NO_RESULTS",
    "DetailFetcher",
    "SearchClient",
    "SearchPipeline",
    "aggregate",
]
