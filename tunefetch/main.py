"""Wiring helpers: build the HTTP client and a ready-to-use fetcher.

The CLI and any embedding application construct their fetcher here so the
transport settings (user agent, timeout, redirects) stay in one place.
"""

from __future__ import annotations

import httpx

from tunefetch.config.settings import Settings
from tunefetch.services.catalog_fetcher import CatalogFetcher
from tunefetch.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared async HTTP client for mirror requests.

    The request timeout lives here rather than in the fetcher: a timeout
    surfaces as an ``httpx.TimeoutException`` and the gateway treats it like
    any other transport failure.
    """
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
    )


def build_fetcher(settings: Settings, http_client: httpx.AsyncClient) -> CatalogFetcher:
    """Configure logging from *settings* and return a fresh fetcher session."""
    configure_logging(settings.log_level, json_output=settings.app_env == "production")
    logger.info(
        "fetcher_initialized",
        mirrors=len(settings.mirror_servers),
        active=settings.mirror_servers[0],
        region=settings.region,
    )
    return CatalogFetcher(http_client, settings=settings)
