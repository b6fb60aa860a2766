"""Cached, paginated, failover-aware access to the mirror catalog.

``CatalogFetcher`` sits between page requests and the transport gateway.
For each request it decides whether the relevant cache slot can answer,
fetches (retrying on the next mirror after a transport failure) when it
cannot, and slices out the requested 10-record page.

Cache policy per operation:

    trending  -- fetched once per session, never refreshed
    playlist  -- refetched when the playlist id changes or nothing is cached
    search    -- refetched on a new query, a category change, or a short
                 page window; new results are appended to the category's list

All state lives in the :class:`FetcherSession` owned by one fetcher.  The
fetcher is single-writer: do not share one instance between concurrent
tasks.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar
from urllib.parse import quote, quote_plus

import httpx
from pydantic import TypeAdapter

from tunefetch.cache.page_cache import PageWindow, PlaylistCache, SearchCache, TrendingCache
from tunefetch.config.settings import Settings
from tunefetch.interfaces.catalog_provider import ICatalogProvider
from tunefetch.models.category import CATEGORY_SPECS, MUSIC_FIELDS, SearchCategory
from tunefetch.models.units import ArtistUnit, MusicUnit, PlaylistContent, PlaylistUnit
from tunefetch.providers.gateway import TransportGateway
from tunefetch.providers.server_pool import ServerPool
from tunefetch.utils.errors import EndOfResults
from tunefetch.utils.logging import get_logger

T = TypeVar("T")

TRENDING_RETRY_BUDGET = 2
PLAYLIST_RETRY_BUDGET = 1
SEARCH_RETRY_BUDGET = 1

_TRENDING_ADAPTER: TypeAdapter[list[MusicUnit]] = TypeAdapter(list[MusicUnit])
_PLAYLIST_ADAPTER: TypeAdapter[PlaylistContent] = TypeAdapter(PlaylistContent)


@dataclass
class FetcherSession:
    """Everything a fetcher mutates: the mirror pool and the three cache slots."""

    pool: ServerPool
    trending: TrendingCache = field(default_factory=TrendingCache)
    playlist: PlaylistCache = field(default_factory=PlaylistCache)
    search: SearchCache = field(default_factory=SearchCache)


class CatalogFetcher(ICatalogProvider):
    """Mirror-backed implementation of :class:`ICatalogProvider`.

    Parameters
    ----------
    http_client:
        Shared ``httpx.AsyncClient``; see ``tunefetch.main.build_http_client``.
    settings:
        Mirror list and region.  Defaults to ``Settings()``.
    session:
        Existing session state to continue from.  A fresh one (empty caches,
        first mirror active) is created when omitted.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings | None = None,
        session: FetcherSession | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._session = session or FetcherSession(pool=ServerPool(self._settings.mirror_servers))
        self._gateway = TransportGateway(http_client, self._session.pool)
        self._logger = get_logger(__name__)

    @property
    def session(self) -> FetcherSession:
        return self._session

    # ------------------------------------------------------------------
    # Retry loop
    # ------------------------------------------------------------------

    async def _fetch(self, path: str, decoder: TypeAdapter[T], retry_budget: int) -> T:
        """Run gateway attempts until one succeeds or fails terminally.

        Each retryable failure has already moved the pool to the next mirror
        and costs one unit of *retry_budget*, so at most ``retry_budget + 1``
        attempts are made.
        """
        budget = retry_budget
        while True:
            attempt = await self._gateway.request(path, decoder, budget)
            if attempt.ok:
                return attempt.value  # type: ignore[return-value]
            if not attempt.retryable:
                raise attempt.error  # type: ignore[misc]
            budget -= 1
            self._logger.info(
                "fetch_retry",
                path=path,
                failed_server=attempt.server,
                next_server=self._session.pool.active_base(),
                retry_budget=budget,
            )

    # ------------------------------------------------------------------
    # ICatalogProvider implementation
    # ------------------------------------------------------------------

    async def get_trending_page(self, page: int) -> list[MusicUnit]:
        """Return trending page *page*, fetching the trending list on first use."""
        _check_page(page)
        trending = self._session.trending
        if trending.items is None:
            path = f"/trending?type=Music&region={self._settings.region}&fields={MUSIC_FIELDS}"
            trending.items = await self._fetch(path, _TRENDING_ADAPTER, TRENDING_RETRY_BUDGET)
            self._logger.info("trending_cache_filled", count=len(trending.items))

        window = PageWindow.over(page, len(trending.items))
        if window.is_empty:
            raise EndOfResults("trending", page)
        return window.slice(trending.items)

    async def get_playlist_page(self, playlist_id: str, page: int) -> list[MusicUnit]:
        """Return page *page* of playlist *playlist_id*.

        The cached playlist is replaced only after a successful fetch, so a
        failed switch leaves the previous playlist intact under its own id.
        """
        _check_page(page)
        playlist = self._session.playlist
        if playlist.is_stale_for(playlist_id):
            path = f"/playlists/{quote(playlist_id, safe='')}?fields=videos"
            content = await self._fetch(path, _PLAYLIST_ADAPTER, PLAYLIST_RETRY_BUDGET)
            playlist.replace(playlist_id, content.videos)
            self._logger.info(
                "playlist_cache_filled",
                playlist_id=playlist_id,
                count=len(playlist.items),
            )

        window = PageWindow.over(page, len(playlist.items))
        if window.is_empty:
            raise EndOfResults(f"playlist {playlist_id}", page)
        return window.slice(playlist.items)

    async def search_page(self, category: SearchCategory, query: str, page: int) -> list[Any]:
        """Return page *page* of *category* results for *query*.

        A fetch happens when the query changed, when the previous search was
        for a different category, or when the cached window is short of a
        full page.  The first two also discard the category's cached results
        first; a failed fetch after that leaves the category empty.
        """
        _check_page(page)
        category = SearchCategory(category)
        spec = CATEGORY_SPECS[category]
        cache: SearchCache = self._session.search
        results = cache.results_for(category)

        window = PageWindow.over(page, len(results))
        new_query = query != cache.query
        category_changed = category != cache.last_fetched
        cache.last_fetched = category

        if new_query or category_changed or window.is_insufficient:
            if new_query or category_changed:
                results.clear()
                self._logger.debug(
                    "search_cache_cleared",
                    category=category.value,
                    new_query=new_query,
                    category_changed=category_changed,
                )
            path = (
                f"/search?q={quote_plus(query)}&type={spec.filter_type}"
                f"&region={self._settings.region}&page={page}&fields={spec.fields}"
            )
            fetched = await self._fetch(path, spec.adapter, SEARCH_RETRY_BUDGET)
            cache.query = query
            results.extend(fetched)
            window = PageWindow.over(page, len(results))
            self._logger.info(
                "search_cache_extended",
                category=category.value,
                query=query,
                page=page,
                fetched=len(fetched),
                cached=len(results),
            )

        if window.is_empty:
            raise EndOfResults(f"{category.value} search", page)
        return window.slice(results)

    # ------------------------------------------------------------------
    # Per-category shortcuts
    # ------------------------------------------------------------------

    async def search_music(self, query: str, page: int) -> list[MusicUnit]:
        return await self.search_page(SearchCategory.MUSIC, query, page)

    async def search_playlist(self, query: str, page: int) -> list[PlaylistUnit]:
        return await self.search_page(SearchCategory.PLAYLIST, query, page)

    async def search_artist(self, query: str, page: int) -> list[ArtistUnit]:
        return await self.search_page(SearchCategory.ARTIST, query, page)

    # ------------------------------------------------------------------
    # Page iteration
    # ------------------------------------------------------------------

    def iter_trending(self) -> AsyncIterator[list[MusicUnit]]:
        """Yield trending pages from page 0 until the results run out."""
        return _iter_pages(self.get_trending_page)

    def iter_playlist(self, playlist_id: str) -> AsyncIterator[list[MusicUnit]]:
        """Yield pages of *playlist_id* from page 0 until the results run out."""
        return _iter_pages(lambda page: self.get_playlist_page(playlist_id, page))

    def iter_search(self, category: SearchCategory, query: str) -> AsyncIterator[list[Any]]:
        """Yield *category* search pages for *query* until the results run out."""
        return _iter_pages(lambda page: self.search_page(category, query, page))


async def _iter_pages(
    fetch_page: Callable[[int], Awaitable[list[Any]]],
) -> AsyncIterator[list[Any]]:
    page = 0
    while True:
        try:
            items = await fetch_page(page)
        except EndOfResults:
            return
        yield items
        page += 1


def _check_page(page: int) -> None:
    if page < 0:
        raise ValueError(f"page must be non-negative, got {page}")
