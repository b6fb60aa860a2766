"""Abstract base class for paginated catalog providers.

Defines the page-level contract a browsing client relies on: trending
tracks, the content of one playlist, and category search.  Every operation
returns one page of at most ``ITEMS_PER_PAGE`` records.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from tunefetch.models.category import SearchCategory
from tunefetch.models.units import MusicUnit


class ICatalogProvider(ABC):
    """Contract for paginated music catalog access.

    Pages are 0-based.  A page beyond the known data raises
    :class:`~tunefetch.utils.errors.EndOfResults`; any real failure raises a
    :class:`~tunefetch.utils.errors.TuneFetchError` subclass.
    """

    @abstractmethod
    async def get_trending_page(self, page: int) -> list[MusicUnit]:
        """Return one page of currently trending music.

        Parameters
        ----------
        page:
            0-based page index.
        """

    @abstractmethod
    async def get_playlist_page(self, playlist_id: str, page: int) -> list[MusicUnit]:
        """Return one page of the tracks in playlist *playlist_id*.

        Parameters
        ----------
        playlist_id:
            Upstream playlist identifier.
        page:
            0-based page index.
        """

    @abstractmethod
    async def search_page(self, category: SearchCategory, query: str, page: int) -> list[Any]:
        """Return one page of *category* results for *query*.

        Parameters
        ----------
        category:
            Which record type to search for.
        query:
            Free-text search string.
        page:
            0-based page index.

        Returns
        -------
        list
            ``MusicUnit``, ``PlaylistUnit`` or ``ArtistUnit`` records,
            depending on *category*.
        """
