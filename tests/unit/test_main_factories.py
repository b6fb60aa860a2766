"""Unit tests for the wiring helpers in tunefetch.main."""

from __future__ import annotations

import httpx
import pytest

from tunefetch.config.settings import Settings
from tunefetch.main import build_fetcher, build_http_client
from tunefetch.services.catalog_fetcher import CatalogFetcher


class TestBuildHttpClient:
    @pytest.mark.asyncio
    async def test_applies_transport_settings(self) -> None:
        settings = Settings(user_agent="tunefetch-test/1.0", request_timeout=2.5)

        async with build_http_client(settings) as client:
            assert client.headers["User-Agent"] == "tunefetch-test/1.0"
            assert client.timeout == httpx.Timeout(2.5)
            assert client.follow_redirects is True


class TestBuildFetcher:
    def test_fresh_session_starts_on_first_mirror(self, settings: Settings) -> None:
        fetcher = build_fetcher(settings, httpx.AsyncClient())

        assert isinstance(fetcher, CatalogFetcher)
        session = fetcher.session
        assert session.pool.servers == tuple(settings.mirror_servers)
        assert session.pool.index == 0
        assert session.trending.items is None
        assert session.playlist.items == []
        assert session.search.last_fetched is None

    def test_each_fetcher_owns_its_session(self, settings: Settings) -> None:
        client = httpx.AsyncClient()
        first = build_fetcher(settings, client)
        second = build_fetcher(settings, client)

        first.session.pool.rotate()

        assert first.session is not second.session
        assert second.session.pool.index == 0
