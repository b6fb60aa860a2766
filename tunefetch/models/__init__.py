"""tunefetch domain models -- re-exports all public model classes.

    - units.py    -- MusicUnit, PlaylistUnit, ArtistUnit and the playlist envelope
    - category.py -- SearchCategory and the per-category request table
"""

from __future__ import annotations

from tunefetch.models.category import CATEGORY_SPECS, CategorySpec, SearchCategory
from tunefetch.models.units import (
    WATCH_URL,
    ArtistUnit,
    MusicUnit,
    PlaylistContent,
    PlaylistUnit,
)

__all__ = [
    "CATEGORY_SPECS",
    "WATCH_URL",
    "ArtistUnit",
    "CategorySpec",
    "MusicUnit",
    "PlaylistContent",
    "PlaylistUnit",
    "SearchCategory",
]
