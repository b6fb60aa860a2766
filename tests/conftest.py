"""Shared pytest fixtures for the tunefetch test suite.

Upstream mirrors are simulated with ``httpx.MockTransport``; no test touches
the network.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx
import pytest

from tunefetch.config.settings import Settings
from tunefetch.services.catalog_fetcher import CatalogFetcher

MIRRORS = [
    "https://m1.test/api/v1",
    "https://m2.test/api/v1",
    "https://m3.test/api/v1",
]


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


def music_items(count: int, prefix: str = "t") -> list[dict[str, Any]]:
    """Wire-format track records: ``{title, videoId, author, lengthSeconds}``."""
    return [
        {
            "title": f"{prefix} song {i}",
            "videoId": f"{prefix}{i:04d}",
            "author": f"{prefix} artist",
            "lengthSeconds": 180 + i,
        }
        for i in range(count)
    ]


def playlist_items(count: int, prefix: str = "p") -> list[dict[str, Any]]:
    return [
        {
            "title": f"{prefix} playlist {i}",
            "playlistId": f"PL{prefix}{i:04d}",
            "author": f"{prefix} curator",
            "videoCount": 10 + i,
        }
        for i in range(count)
    ]


def artist_items(count: int, prefix: str = "a") -> list[dict[str, Any]]:
    return [
        {"author": f"{prefix} artist {i}", "authorId": f"UC{prefix}{i:04d}", "videoCount": 5 + i}
        for i in range(count)
    ]


# ---------------------------------------------------------------------------
# Fake mirrors
# ---------------------------------------------------------------------------


class FakeMirrors:
    """MockTransport handler that records requests and serves canned bodies.

    Routes are matched on the path below ``/api/v1`` (``"/trending"``,
    ``"/playlists/PLA"``, ``"/search"``).  A body may be a JSON-able value,
    raw ``bytes``, or a callable taking the request.  Hosts listed in
    ``down`` raise ``httpx.ConnectError`` instead of answering.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.down: set[str] = set()
        self._routes: dict[str, Any] = {}

    def serve(self, route: str, body: Any) -> None:
        self._routes[route] = body

    def calls_to(self, route: str) -> list[httpx.Request]:
        return [r for r in self.requests if _route_of(r) == route]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host in self.down:
            raise httpx.ConnectError("connection refused", request=request)
        route = _route_of(request)
        if route not in self._routes:
            return httpx.Response(404, json={"error": f"no route {route}"})
        body = self._routes[route]
        if callable(body):
            body = body(request)
        if isinstance(body, bytes):
            return httpx.Response(200, content=body)
        return httpx.Response(200, json=body)


def _route_of(request: httpx.Request) -> str:
    return request.url.path.removeprefix("/api/v1")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def settings() -> Settings:
    return Settings(mirror_servers=list(MIRRORS), region="NP", log_level="WARNING")


@pytest.fixture
def mirrors() -> FakeMirrors:
    return FakeMirrors()


@pytest.fixture
def http_client(mirrors: FakeMirrors) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(mirrors))


@pytest.fixture
def fetcher(http_client: httpx.AsyncClient, settings: Settings) -> CatalogFetcher:
    return CatalogFetcher(http_client, settings=settings)
