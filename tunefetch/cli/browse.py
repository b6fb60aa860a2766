"""CLI for browsing the mirror catalog page by page.

Usage::

    # First page of trending music
    python -m tunefetch.cli trending

    # Every page of a playlist
    python -m tunefetch.cli playlist PLo4CR7vlB7oIokHy6JOnPLAmSiilJq7ms --all

    # Second page of artist search, as JSON
    python -m tunefetch.cli search artist "Rachana Dahal" --page 1 --json

Exit status is 0 when pages were printed or the results simply ran out, and
1 when a fetch failed.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from tunefetch.config.loader import load_settings
from tunefetch.config.settings import Settings
from tunefetch.main import build_fetcher, build_http_client
from tunefetch.models.category import SearchCategory
from tunefetch.models.units import ArtistUnit, MusicUnit, PlaylistUnit
from tunefetch.services.catalog_fetcher import CatalogFetcher
from tunefetch.utils.errors import ConfigurationError, EndOfResults, TuneFetchError


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def _format_unit(unit: Any) -> str:
    if isinstance(unit, MusicUnit):
        return f"{unit.name} - {unit.artist} [{unit.duration}] {unit.path}"
    if isinstance(unit, PlaylistUnit):
        return f"{unit.title} by {unit.author} ({unit.video_count} videos) id={unit.id}"
    if isinstance(unit, ArtistUnit):
        return f"{unit.author} ({unit.video_count} videos) id={unit.id}"
    return str(unit)


def _print_page(page: int, units: list[Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps({"page": page, "items": [u.model_dump() for u in units]}))
        return
    print(f"--- page {page} ---")
    for unit in units:
        print(f"  {_format_unit(unit)}")


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _page_source(
    args: argparse.Namespace, fetcher: CatalogFetcher
) -> tuple[Callable[[int], Awaitable[list[Any]]], Callable[[], AsyncIterator[list[Any]]]]:
    """Return (single-page fetch, all-pages iterator) for the chosen command."""
    if args.command == "trending":
        return fetcher.get_trending_page, fetcher.iter_trending
    if args.command == "playlist":
        return (
            lambda page: fetcher.get_playlist_page(args.playlist_id, page),
            lambda: fetcher.iter_playlist(args.playlist_id),
        )
    category = SearchCategory(args.category)
    return (
        lambda page: fetcher.search_page(category, args.query, page),
        lambda: fetcher.iter_search(category, args.query),
    )


async def _run(args: argparse.Namespace, app_settings: Settings) -> int:
    """Fetch and print the requested page(s)."""
    async with build_http_client(app_settings) as client:
        fetcher = build_fetcher(app_settings, client)
        fetch_page, iter_pages = _page_source(args, fetcher)
        try:
            if args.all:
                page = 0
                async for units in iter_pages():
                    _print_page(page, units, args.json)
                    page += 1
                if page == 0:
                    print("No results.")
            else:
                _print_page(args.page, await fetch_page(args.page), args.json)
        except EndOfResults:
            print(f"No results on page {args.page}.")
        except TuneFetchError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    return 0


def _non_negative(value: str) -> int:
    page = int(value)
    if page < 0:
        raise argparse.ArgumentTypeError("page must be >= 0")
    return page


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the browse CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m tunefetch.cli",
        description="Browse trending music, playlists and search results from catalog mirrors.",
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="YAML config file (default: config/config.yaml)",
    )

    # Shared by every subcommand.
    paging = argparse.ArgumentParser(add_help=False)
    group = paging.add_mutually_exclusive_group()
    group.add_argument("--page", type=_non_negative, default=0, help="0-based page (default: 0)")
    group.add_argument("--all", action="store_true", help="Print every page until results run out")
    paging.add_argument("--json", action="store_true", help="Print one JSON object per page")

    subparsers = parser.add_subparsers(dest="command", help="Catalog commands")

    subparsers.add_parser("trending", parents=[paging], help="Trending music")

    playlist_parser = subparsers.add_parser("playlist", parents=[paging], help="Playlist content")
    playlist_parser.add_argument("playlist_id", help="Upstream playlist id")

    search_parser = subparsers.add_parser("search", parents=[paging], help="Search the catalog")
    search_parser.add_argument(
        "category",
        choices=[c.value for c in SearchCategory],
        help="Kind of result to search for",
    )
    search_parser.add_argument("query", help="Search text")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the browse tool."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        app_settings = load_settings(args.config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    sys.exit(asyncio.run(_run(args, app_settings)))


if __name__ == "__main__":
    main()
