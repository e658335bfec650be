# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Asynchronous HTTP access for host, manifest, and render-service calls.

Each request is a single suspension point on the event loop: the coroutine
awaits the response and either returns it or raises
:class:`~renderprof.errors.NetworkError`. Cancelling the awaiting task aborts
the request in flight.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Final, Protocol, Self, runtime_checkable

import httpx

from .errors import NetworkError

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final[float] = 30.0
DEFAULT_ENCODING: Final[str] = "utf-8"
USER_AGENT: Final[str] = "renderprof"


@dataclass(slots=True, frozen=True)
class HttpResponse:
    """Successful HTTP response captured as raw bytes."""

    url: str
    status: int
    body: bytes
    encoding: str = DEFAULT_ENCODING

    @property
    def text(self) -> str:
        """Return the body decoded with the response encoding."""

        return self.body.decode(self.encoding, errors="replace")

    def json(self) -> Any:
        """Return the body parsed as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """

        return json.loads(self.text)


@runtime_checkable
class HttpClient(Protocol):
    """Minimal asynchronous HTTP surface used by the profiler."""

    async def get(self, url: str) -> HttpResponse:
        """Issue a GET request for ``url``."""
        ...

    async def post_json(self, url: str, payload: Any) -> HttpResponse:
        """POST ``payload`` as a JSON body to ``url``."""
        ...

    async def aclose(self) -> None:
        """Release any resources held by the client."""
        ...


class AsyncHttpClient:
    """:class:`HttpClient` backed by a shared :class:`httpx.AsyncClient`."""

    def __init__(
        self,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a client applying ``timeout`` to every request.

        Args:
            timeout: Per-request timeout in seconds; ``None`` waits indefinitely.
            transport: Optional transport replacing the network, mainly for tests.
        """

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
        )

    async def get(self, url: str) -> HttpResponse:
        return await self._send("GET", url, None)

    async def post_json(self, url: str, payload: Any) -> HttpResponse:
        return await self._send("POST", url, payload)

    async def _send(self, method: str, url: str, payload: Any) -> HttpResponse:
        LOGGER.debug("%s %s", method, url)
        try:
            response = await self._client.request(method, url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(url, method=method, reason=str(exc) or type(exc).__name__) from exc
        if response.is_error:
            raise NetworkError(url, method=method, status=response.status_code)
        return HttpResponse(
            url=url,
            status=response.status_code,
            body=response.content,
            # Undeclared charsets are read as UTF-8, never ISO-8859-1.
            encoding=response.charset_encoding or DEFAULT_ENCODING,
        )

    async def aclose(self) -> None:
        """Release pooled connections held by the client."""

        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["AsyncHttpClient", "DEFAULT_TIMEOUT", "HttpClient", "HttpResponse"]
