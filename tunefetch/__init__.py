"""tunefetch -- a paginated, caching, failover client for music catalog mirrors.

Typical use::

    async with build_http_client(settings) as client:
        fetcher = build_fetcher(settings, client)
        async for page in fetcher.iter_trending():
            ...
"""

from tunefetch.config.settings import Settings
from tunefetch.main import build_fetcher, build_http_client
from tunefetch.models.category import SearchCategory
from tunefetch.models.units import ArtistUnit, MusicUnit, PlaylistUnit
from tunefetch.services.catalog_fetcher import CatalogFetcher, FetcherSession
from tunefetch.utils.errors import EndOfResults, TuneFetchError

__version__ = "0.1.0"

__all__ = [
    "ArtistUnit",
    "CatalogFetcher",
    "EndOfResults",
    "FetcherSession",
    "MusicUnit",
    "PlaylistUnit",
    "SearchCategory",
    "Settings",
    "TuneFetchError",
    "build_fetcher",
    "build_http_client",
]
