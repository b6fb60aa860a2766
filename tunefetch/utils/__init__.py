"""Utility modules for tunefetch.

Available utility modules (all re-exported here for convenience):

- **duration** -- ``M:SS`` track-duration formatting and parsing.
- **errors** -- Exception hierarchy rooted at TuneFetchError, plus the
  EndOfResults pagination signal that lives outside it.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

# -- Track duration codec --------------------------------------------------
from tunefetch.utils.duration import format_duration, parse_duration

# -- Exception hierarchy ---------------------------------------------------
from tunefetch.utils.errors import (
    ConfigurationError,
    EndOfResults,
    MirrorUnavailableError,
    PayloadDecodeError,
    TuneFetchError,
)

# -- Structured logging setup ----------------------------------------------
from tunefetch.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "EndOfResults",
    "MirrorUnavailableError",
    "PayloadDecodeError",
    "TuneFetchError",
    "configure_logging",
    "format_duration",
    "get_logger",
    "parse_duration",
]
