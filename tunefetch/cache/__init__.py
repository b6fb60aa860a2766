"""Page cache slots.

Memory-resident only: the cache lives as long as the fetcher session that
owns it and is lost on exit.
"""

from tunefetch.cache.page_cache import (
    ITEMS_PER_PAGE,
    PageWindow,
    PlaylistCache,
    SearchCache,
    TrendingCache,
)

__all__ = ["ITEMS_PER_PAGE", "PageWindow", "PlaylistCache", "SearchCache", "TrendingCache"]
