"""Custom exception hierarchy for tunefetch.

All failure exceptions inherit from :class:`TuneFetchError`, which carries an
optional ``server`` so error handlers can identify which mirror (e.g.
``"https://vid.puffyan.us/api/v1"``) caused the failure.

    TuneFetchError  (base -- catch-all for any tunefetch failure)
    +-- MirrorUnavailableError  (transport failure: connect / timeout / network)
    +-- PayloadDecodeError      (response body did not decode into the expected shape)
    +-- ConfigurationError      (startup / invalid config)

:class:`EndOfResults` deliberately sits *outside* the hierarchy.  It is the
normal end of a pagination loop, not something to report to a user, so an
``except TuneFetchError`` block never swallows it by accident.
"""


class TuneFetchError(Exception):
    """Base exception for all tunefetch failures.

    Every subclass carries a human-readable ``message`` and an optional
    ``server`` identifying the mirror that triggered the error.  The
    ``__str__`` method prefixes the server in brackets for log output,
    e.g. ``[https://ytb.trom.tf/api/v1] Connection refused``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        server: str | None = None,
    ) -> None:
        self._message = message
        self._server = server
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def server(self) -> str | None:
        return self._server

    def __str__(self) -> str:
        if self._server:
            return f"[{self._server}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Fetch errors
# ---------------------------------------------------------------------------

class MirrorUnavailableError(TuneFetchError):
    """Raised when a mirror cannot be reached (connection, timeout, protocol).

    ``retryable`` is ``True`` when the gateway still had retry budget and has
    already rotated the server pool, so the next attempt targets a different
    mirror.  A non-retryable instance is terminal and reaches the caller.
    """

    def __init__(
        self,
        message: str = "Mirror server is unavailable",
        server: str | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message=message, server=server)
        self._retryable = retryable

    @property
    def retryable(self) -> bool:
        return self._retryable


class PayloadDecodeError(TuneFetchError):
    """Raised when a response body does not decode into the expected records.

    Always terminal: a malformed payload is treated as a data-shape problem,
    not something another mirror would fix.
    """

    def __init__(
        self,
        message: str = "Response payload could not be decoded",
        server: str | None = None,
    ) -> None:
        super().__init__(message=message, server=server)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(TuneFetchError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        server: str | None = None,
    ) -> None:
        super().__init__(message=message, server=server)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

class EndOfResults(Exception):
    """Signals that the requested page lies beyond all known data for its scope.

    Not a failure.  Pagination loops catch it to stop.
    """

    def __init__(self, scope: str = "", page: int = 0) -> None:
        self.scope = scope
        self.page = page
        super().__init__(f"No results for {scope or 'request'} page {page}")
