"""Result records decoded from mirror responses.

Three unit types cover everything the catalog endpoints return:

    - MusicUnit    -- a single track (trending, playlist content, music search)
    - PlaylistUnit -- a playlist search hit
    - ArtistUnit   -- a channel / artist search hit

All models are frozen and compare by value.  They accept either the
upstream wire shape (``videoId``, ``lengthSeconds``, ``playlistId`` ...) or
their own field names, so a unit can be rebuilt from ``model_dump()``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tunefetch.utils.duration import format_duration, parse_duration

WATCH_URL = "https://www.youtube.com/watch?v="


class MusicUnit(BaseModel):
    """A playable track.

    Decoded from ``{title, videoId, author, lengthSeconds}``: ``name`` is the
    title, ``artist`` the uploader, ``duration`` is rendered as ``M:SS`` and
    ``path`` is the full watch URL.  ``liked`` is client-side state and
    always starts ``False``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    artist: str
    duration: str
    path: str
    liked: bool = False

    @model_validator(mode="before")
    @classmethod
    def from_wire_record(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "videoId" not in data:
            return data
        video_id = data.get("videoId")
        return {
            "name": data.get("title"),
            "artist": data.get("author"),
            "duration": data.get("lengthSeconds"),
            "path": f"{WATCH_URL}{video_id}" if isinstance(video_id, str) else video_id,
            "liked": False,
        }

    @field_validator("duration", mode="before")
    @classmethod
    def format_length_seconds(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return format_duration(value)
        return value

    @property
    def duration_seconds(self) -> int:
        """The track length in seconds, parsed back from ``duration``."""
        return parse_duration(self.duration)


class PlaylistUnit(BaseModel):
    """A playlist returned by a playlist-category search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    id: str = Field(alias="playlistId")
    author: str
    video_count: int = Field(alias="videoCount")


class ArtistUnit(BaseModel):
    """A channel returned by an artist-category search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    author: str
    id: str = Field(alias="authorId")
    video_count: int = Field(alias="videoCount")


class PlaylistContent(BaseModel):
    """Envelope of ``/playlists/{id}?fields=videos``."""

    model_config = ConfigDict(frozen=True)

    videos: list[MusicUnit] = Field(default_factory=list)
