"""Search categories and the per-category request parameters.

The three search flavours share one algorithm; everything that differs
between them lives in :data:`CATEGORY_SPECS`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import TypeAdapter

from tunefetch.models.units import ArtistUnit, MusicUnit, PlaylistUnit

MUSIC_FIELDS = "videoId,title,author,lengthSeconds"
PLAYLIST_FIELDS = "title,playlistId,author,videoCount"
ARTIST_FIELDS = "author,authorId,videoCount"


class SearchCategory(str, Enum):  # noqa: UP042
    """What kind of record a search returns."""

    MUSIC = "music"
    PLAYLIST = "playlist"
    ARTIST = "artist"


@dataclass(frozen=True)
class CategorySpec:
    """Request parameters for one search category.

    Attributes
    ----------
    filter_type:
        Value of the upstream ``type=`` query parameter.
    fields:
        Field projection passed as ``fields=`` so mirrors only send what the
        unit model decodes.
    adapter:
        Decoder for a JSON array of the category's unit type.
    """

    filter_type: str
    fields: str
    adapter: TypeAdapter[Any]


CATEGORY_SPECS: dict[SearchCategory, CategorySpec] = {
    SearchCategory.MUSIC: CategorySpec("music", MUSIC_FIELDS, TypeAdapter(list[MusicUnit])),
    SearchCategory.PLAYLIST: CategorySpec(
        "playlist", PLAYLIST_FIELDS, TypeAdapter(list[PlaylistUnit])
    ),
    # Artists are channels upstream.
    SearchCategory.ARTIST: CategorySpec("channel", ARTIST_FIELDS, TypeAdapter(list[ArtistUnit])),
}
