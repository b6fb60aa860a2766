"""Service layer: the cached, paginated catalog fetcher."""

from tunefetch.services.catalog_fetcher import (
    PLAYLIST_RETRY_BUDGET,
    SEARCH_RETRY_BUDGET,
    TRENDING_RETRY_BUDGET,
    CatalogFetcher,
    FetcherSession,
)

__all__ = [
    "PLAYLIST_RETRY_BUDGET",
    "SEARCH_RETRY_BUDGET",
    "TRENDING_RETRY_BUDGET",
    "CatalogFetcher",
    "FetcherSession",
]
