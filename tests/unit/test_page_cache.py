"""Unit tests for page windows and cache slots."""

from __future__ import annotations

import pytest

from tunefetch.cache.page_cache import (
    ITEMS_PER_PAGE,
    PageWindow,
    PlaylistCache,
    SearchCache,
    TrendingCache,
)
from tunefetch.models.category import SearchCategory
from tunefetch.models.units import MusicUnit


def _unit(i: int) -> MusicUnit:
    return MusicUnit(name=f"n{i}", artist="a", duration="1:00", path=f"p{i}")


class TestPageWindow:
    def test_page_size_is_ten(self) -> None:
        assert ITEMS_PER_PAGE == 10

    def test_full_first_page(self) -> None:
        window = PageWindow.over(0, 25)
        assert (window.lower, window.upper) == (0, 10)
        assert not window.is_insufficient

    def test_partial_last_page(self) -> None:
        window = PageWindow.over(2, 25)
        assert (window.lower, window.upper) == (20, 25)
        assert window.size == 5
        assert window.is_insufficient
        assert not window.is_empty

    def test_page_past_end_is_empty(self) -> None:
        window = PageWindow.over(3, 25)
        assert window.is_empty
        assert window.size == 0

    def test_exact_multiple_boundary_is_empty(self) -> None:
        assert PageWindow.over(2, 20).is_empty

    def test_negative_page_rejected(self) -> None:
        with pytest.raises(ValueError):
            PageWindow.over(-1, 10)

    def test_slice_is_a_copy(self) -> None:
        items = list(range(15))
        page = PageWindow.over(1, len(items)).slice(items)
        page.append(99)
        assert page[:5] == [10, 11, 12, 13, 14]
        assert len(items) == 15


class TestCacheSlots:
    def test_trending_starts_absent(self) -> None:
        cache = TrendingCache()
        assert not cache.is_filled
        cache.items = []
        assert cache.is_filled

    def test_playlist_stale_on_new_id_or_empty(self) -> None:
        cache = PlaylistCache()
        assert cache.is_stale_for("")
        cache.replace("PLA", [_unit(1)])
        assert not cache.is_stale_for("PLA")
        assert cache.is_stale_for("PLB")
        cache.replace("PLA", [])
        assert cache.is_stale_for("PLA")

    def test_search_results_for_returns_live_list(self) -> None:
        cache = SearchCache()
        cache.results_for(SearchCategory.ARTIST).append("x")
        assert cache.artist == ["x"]
        assert cache.music == []
        assert cache.results_for(SearchCategory.PLAYLIST) is cache.playlist
