"""Single-attempt HTTP gateway to the active mirror.

The gateway issues exactly one GET per call and decodes the body with a
pydantic ``TypeAdapter``.  It never loops.  When a transport failure happens
while the caller still has retry budget, it rotates the server pool before
returning, so the caller's next attempt lands on a different mirror.  That
side effect is reported on the returned :class:`Attempt` rather than left
implicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from tunefetch.providers.server_pool import ServerPool
from tunefetch.utils.errors import MirrorUnavailableError, PayloadDecodeError, TuneFetchError
from tunefetch.utils.logging import get_logger

T = TypeVar("T")


@dataclass(frozen=True)
class Attempt(Generic[T]):
    """Outcome of one gateway request.

    Attributes
    ----------
    server:
        Base URL the request was sent to.
    value:
        Decoded payload on success.
    error:
        The failure, or ``None`` on success.
    rotated:
        ``True`` when the pool was advanced because of this attempt.  Only
        retryable failures rotate.
    """

    server: str
    value: T | None = None
    error: TuneFetchError | None = None
    rotated: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def retryable(self) -> bool:
        return isinstance(self.error, MirrorUnavailableError) and self.error.retryable


class TransportGateway:
    """Sends catalog requests to whichever mirror the pool marks active.

    The ``httpx.AsyncClient`` is injected for testability; its timeout,
    headers and compression settings are the transport's concern.
    """

    def __init__(self, http_client: httpx.AsyncClient, pool: ServerPool) -> None:
        self._http = http_client
        self._pool = pool
        self._logger = get_logger(__name__)

    @property
    def pool(self) -> ServerPool:
        return self._pool

    async def request(self, path: str, decoder: TypeAdapter[T], retry_budget: int) -> Attempt[T]:
        """GET ``active_base() + path`` once and decode the body.

        Parameters
        ----------
        path:
            Endpoint path including its query string, e.g. ``/trending?type=Music``.
        decoder:
            Adapter for the expected response shape.
        retry_budget:
            Remaining retries for the caller's logical operation.  A transport
            failure rotates the pool and is retryable only when this is > 0.
        """
        server = self._pool.active_base()
        url = server + path
        try:
            response = await self._http.get(url)
        except httpx.TransportError as exc:
            if retry_budget > 0:
                self._pool.rotate()
                self._logger.warning(
                    "mirror_request_failed",
                    url=url,
                    error=str(exc) or type(exc).__name__,
                    retry_budget=retry_budget,
                )
                return Attempt(
                    server=server,
                    error=MirrorUnavailableError(
                        message=f"Request to {path} failed: {exc!r}",
                        server=server,
                        retryable=True,
                    ),
                    rotated=True,
                )
            self._logger.error("mirror_request_failed_terminal", url=url, error=repr(exc))
            return Attempt(
                server=server,
                error=MirrorUnavailableError(
                    message=f"Request to {path} failed: {exc!r}",
                    server=server,
                ),
            )
        except httpx.RequestError as exc:
            # Redirect loops, broken content encoding: not fixed by another mirror.
            self._logger.error("mirror_request_rejected", url=url, error=repr(exc))
            return Attempt(
                server=server,
                error=MirrorUnavailableError(
                    message=f"Request to {path} failed: {exc!r}",
                    server=server,
                ),
            )

        try:
            value = decoder.validate_json(response.content)
        except ValidationError as exc:
            self._logger.error(
                "payload_decode_failed",
                url=url,
                status=response.status_code,
                errors=exc.error_count(),
            )
            return Attempt(
                server=server,
                error=PayloadDecodeError(
                    message=(
                        f"Response from {path} (HTTP {response.status_code}) "
                        f"did not match the expected shape: {exc.error_count()} error(s)"
                    ),
                    server=server,
                ),
            )

        self._logger.debug("mirror_request_ok", url=url, status=response.status_code)
        return Attempt(server=server, value=value)
