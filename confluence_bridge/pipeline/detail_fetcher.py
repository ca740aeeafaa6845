"""
Confluence Bridge - Detail Fetcher

Retrieves the rendered body of each search hit, strictly one request at a
time, waiting a fixed pacing interval before every request.

Failure isolation:
- Non-2xx status, missing body, transport error or an undecodable body for one
  hit becomes SkippedFailure for that hit only
- The remaining hits are still fetched; this class never ends a run
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from confluence_bridge.core.logging import get_logger
from confluence_bridge.pipeline.models import (
    DETAIL_EXPAND,
    EMPTY_CONTENT_REASON,
    Content,
    Credentials,
    DetailOutcome,
    SearchHit,
    SkippedFailure,
)
from confluence_bridge.pipeline.pacing import AsyncioSleeper, SleeperProtocol

logger = get_logger(__name__)

DEFAULT_CONTENT_PATH = "/rest/api/content"
DEFAULT_PACING_INTERVAL = 1.0


class DetailFetcher:
    """Paced, sequential fetcher for Confluence content bodies.

    Attributes:
        pacing_interval: Seconds to wait before each detail request
        content_path: Path of the content endpoint relative to the client's base_url
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        sleeper: SleeperProtocol | None = None,
        pacing_interval: float = DEFAULT_PACING_INTERVAL,
        content_path: str = DEFAULT_CONTENT_PATH,
    ) -> None:
        if pacing_interval < 0:
            raise ValueError(f"pacing_interval must be >= 0, got {pacing_interval}")
        self._client = http_client
        self._sleeper = sleeper if sleeper is not None else AsyncioSleeper()
        self.pacing_interval = pacing_interval
        self.content_path = content_path.rstrip("/")

    async def fetch_all(
        self,
        hits: Sequence[SearchHit],
        credentials: Credentials,
    ) -> list[DetailOutcome]:
        """Fetch every hit in order.

        Args:
            hits: Search hits, in backend order
            credentials: Bearer credential

        Returns:
            One DetailOutcome per hit, in the same order
        """
        outcomes: list[DetailOutcome] = []
        for hit in hits:
            await self._sleeper.sleep(self.pacing_interval)
            outcomes.append(await self._fetch_one(hit, credentials))
        return outcomes

    async def _fetch_one(self, hit: SearchHit, credentials: Credentials) -> DetailOutcome:
        content_id = hit.content_id
        logger.debug("detail_fetch_started", content_id=content_id)
        try:
            response = await self._client.get(
                f"{self.content_path}/{content_id}",
                params={"expand": DETAIL_EXPAND},
                headers=credentials.headers(),
            )
            if not response.is_success:
                logger.warning(
                    "detail_fetch_skipped",
                    content_id=content_id,
                    status=response.status_code,
                    message=response.text,
                )
                return SkippedFailure(
                    content_id=content_id,
                    status=response.status_code,
                    message=response.text,
                )
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("detail_fetch_error", content_id=content_id, error=str(e))
            return SkippedFailure(content_id=content_id, status=None, message=str(e))

        text = _extract_view(payload)
        if not text:
            logger.warning("detail_fetch_skipped", content_id=content_id, reason=EMPTY_CONTENT_REASON)
            return SkippedFailure(content_id=content_id, status=None, message=EMPTY_CONTENT_REASON)

        return Content(content_id=content_id, text=text)


def _extract_view(payload: Any) -> str | None:
    """Return ``body.view.value`` from a content payload, if present."""
    node: Any = payload
    for key in ("body", "view", "value"):
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node if isinstance(node, str) else None
