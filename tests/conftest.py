"""
Shared fixtures: an in-memory Confluence backend served through
httpx.MockTransport, so tests exercise the real HTTP code paths without
network access.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from confluence_bridge.core.config import Settings
from confluence_bridge.pipeline.fakes import FakeSleeper

BASE_URL = "https://confluence.test"
TOKEN = "test-token"


@dataclass
class RecordedRequest:
    """A request seen by the stub, with the virtual time it arrived at."""

    method: str
    path: str
    params: dict[str, str]
    headers: dict[str, str]
    at: float


@dataclass
class ConfluenceStub:
    """Deterministic Confluence backend.

    Attributes:
        search_status: Status returned by /rest/api/search
        search_body: JSON body (dict) or raw text returned by the search
        details: content_id -> (status, JSON body, raw text or raw bytes)
        raise_for: content ids whose detail request raises a transport error
        clock: Time source recorded with each request
    """

    search_status: int = 200
    search_body: Any = field(default_factory=lambda: {"results": []})
    details: dict[str, tuple[int, Any]] = field(default_factory=dict)
    raise_for: set[str] = field(default_factory=set)
    clock: Callable[[], float] = lambda: 0.0
    requests: list[RecordedRequest] = field(default_factory=list)

    def set_hits(self, *content_ids: str | None) -> None:
        """Make the search return one result per id; None means no content id."""
        results = [
            {"content": {"id": cid}} if cid is not None else {"title": "no id"}
            for cid in content_ids
        ]
        self.search_status = 200
        self.search_body = {"results": results}

    def set_body(self, content_id: str, html: str) -> None:
        self.details[content_id] = (200, {"id": content_id, "body": {"view": {"value": html}}})

    def set_detail_status(self, content_id: str, status: int, text: str = "error") -> None:
        self.details[content_id] = (status, text)

    @property
    def search_requests(self) -> list[RecordedRequest]:
        return [r for r in self.requests if r.path.endswith("/search")]

    @property
    def detail_requests(self) -> list[RecordedRequest]:
        return [r for r in self.requests if "/content/" in r.path]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                params=dict(request.url.params),
                headers=dict(request.headers),
                at=self.clock(),
            )
        )
        if request.url.path == "/rest/api/search":
            return _response(self.search_status, self.search_body)

        content_id = request.url.path.rsplit("/", 1)[-1]
        if content_id in self.raise_for:
            raise httpx.ConnectError("connection reset", request=request)
        status, body = self.details.get(content_id, (404, "Not Found"))
        return _response(status, body)


def _response(status: int, body: Any) -> httpx.Response:
    if isinstance(body, str):
        return httpx.Response(status, text=body)
    content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return httpx.Response(
        status,
        content=content,
        headers={"content-type": "application/json"},
    )


@pytest.fixture
def sleeper() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture
def stub(sleeper: FakeSleeper) -> ConfluenceStub:
    return ConfluenceStub(clock=sleeper.monotonic)


@pytest.fixture
def http_client(stub: ConfluenceStub) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(stub.handle))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        base_url=BASE_URL,
        bearer_token=TOKEN,
        limit=2,
        pacing_interval=1.0,
        _env_file=None,
    )
