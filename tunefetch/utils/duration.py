"""Track duration formatting in the ``M:SS`` style shown next to each track."""

from __future__ import annotations


def format_duration(seconds: int) -> str:
    """Render *seconds* as ``minutes:seconds`` (e.g. ``271`` -> ``"4:31"``).

    Minutes are not wrapped into hours; a 75-minute mix renders as ``"75:00"``.
    """
    if seconds < 0:
        raise ValueError(f"duration cannot be negative: {seconds}")
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def parse_duration(text: str) -> int:
    """Parse a ``minutes:seconds`` string back into total seconds.

    Either side that is not a plain integer counts as zero, so ``"4:"`` is
    240 seconds.  A string without a colon is rejected.
    """
    minutes_part, sep, seconds_part = text.partition(":")
    if not sep:
        raise ValueError(f"expected 'minutes:seconds', got {text!r}")
    return 60 * _to_int(minutes_part) + _to_int(seconds_part)


def _to_int(part: str) -> int:
    part = part.strip()
    return int(part) if part.isdigit() else 0
