"""In-memory page cache slots and the page-window arithmetic.

Each slot remembers the *scope* its data belongs to and the records fetched
for that scope so far:

    TrendingCache -- fetched once, kept for the whole session
    PlaylistCache -- keyed by playlist id; replaced when the id changes
    SearchCache   -- keyed by query string plus the last searched category;
                     one accumulating list per category

The slots hold plain lists and apply no policy of their own: deciding when
to invalidate or extend them is the fetcher's job
(``tunefetch/services/catalog_fetcher.py``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tunefetch.models.category import SearchCategory
from tunefetch.models.units import MusicUnit

ITEMS_PER_PAGE = 10


@dataclass(frozen=True)
class PageWindow:
    """The half-open range ``[lower, upper)`` of one page over a cached list."""

    lower: int
    upper: int

    @classmethod
    def over(cls, page: int, length: int) -> PageWindow:
        """Window for 0-based *page* over a list of *length* records."""
        if page < 0:
            raise ValueError(f"page must be non-negative, got {page}")
        lower = page * ITEMS_PER_PAGE
        return cls(lower=lower, upper=min(length, lower + ITEMS_PER_PAGE))

    @property
    def size(self) -> int:
        return max(self.upper - self.lower, 0)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def is_insufficient(self) -> bool:
        """True when the window holds fewer than a full page of records."""
        return self.size < ITEMS_PER_PAGE

    def slice(self, items: list[Any]) -> list[Any]:
        """Return a copy of the records inside the window."""
        return items[self.lower:self.upper]


@dataclass
class TrendingCache:
    """Trending tracks; ``None`` until the first successful fetch."""

    items: list[MusicUnit] | None = None

    @property
    def is_filled(self) -> bool:
        return self.items is not None


@dataclass
class PlaylistCache:
    """Content of the most recently opened playlist."""

    playlist_id: str = ""
    items: list[MusicUnit] = field(default_factory=list)

    def is_stale_for(self, playlist_id: str) -> bool:
        """True when *playlist_id* is a different scope or nothing is cached."""
        return playlist_id != self.playlist_id or not self.items

    def replace(self, playlist_id: str, items: list[MusicUnit]) -> None:
        self.playlist_id = playlist_id
        self.items = list(items)


@dataclass
class SearchCache:
    """Accumulated search results for the current query.

    ``last_fetched`` is the category of the most recent search request,
    whether or not that request fetched anything.  Switching away from a
    category and back again therefore counts as a category change.
    """

    query: str = ""
    last_fetched: SearchCategory | None = None
    music: list[Any] = field(default_factory=list)
    playlist: list[Any] = field(default_factory=list)
    artist: list[Any] = field(default_factory=list)

    def results_for(self, category: SearchCategory) -> list[Any]:
        """The live (mutable) result list for *category*."""
        if category is SearchCategory.MUSIC:
            return self.music
        if category is SearchCategory.PLAYLIST:
            return self.playlist
        return self.artist
