# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

"""
HTTP transports.

Transports never raise for HTTP error statuses or connectivity problems, they
return a TransportFailure carrying the library exception and the response, if
one was received. Deciding what a failure means is up to the client.
"""

import logging

from typing import Any, NamedTuple, Protocol, Self

import httpx
import requests

from .body import RequestBody, RequestEnvelope
from .models import HTTPResponse


logger = logging.getLogger(__name__)


class TransportFailure(NamedTuple):
    """A request that failed at the transport level."""

    cause: Exception
    response: HTTPResponse | None = None


TransportOutcome = HTTPResponse | TransportFailure


class Transport(Protocol):
    def send(self, envelope: RequestEnvelope) -> TransportOutcome: ...

    def close(self) -> None: ...


class AsyncTransport(Protocol):
    async def send(self, envelope: RequestEnvelope) -> TransportOutcome: ...

    async def aclose(self) -> None: ...


class HTTPXTransport:
    """Transport over a synchronous httpx client."""

    def __init__(self, session: httpx.Client | None = None, **options: Any):
        """
        Initialize the transport.

        Args:
            session: Client to send requests with; one is created from options if not given
            options: httpx.Client options (timeout, verify, proxy, ...)
        """
        self._owns_session = session is None
        if session is None:
            options.setdefault("follow_redirects", True)
            session = httpx.Client(**options)
        self.session = session

    def send(self, envelope: RequestEnvelope) -> TransportOutcome:
        try:
            response = self.session.request(
                envelope.method,
                envelope.url,
                headers=envelope.headers,
                **_httpx_body(envelope.body),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return TransportFailure(e, _httpx_snapshot(e.response))
        except httpx.HTTPError as e:
            logger.debug(f"Request to {envelope.url} failed: {e!r}")
            return TransportFailure(e)
        return _httpx_snapshot(response)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncHTTPXTransport:
    """Transport over an asynchronous httpx client."""

    def __init__(self, session: httpx.AsyncClient | None = None, **options: Any):
        self._owns_session = session is None
        if session is None:
            options.setdefault("follow_redirects", True)
            session = httpx.AsyncClient(**options)
        self.session = session

    async def send(self, envelope: RequestEnvelope) -> TransportOutcome:
        try:
            response = await self.session.request(
                envelope.method,
                envelope.url,
                headers=envelope.headers,
                **_httpx_body(envelope.body),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return TransportFailure(e, _httpx_snapshot(e.response))
        except httpx.HTTPError as e:
            logger.debug(f"Request to {envelope.url} failed: {e!r}")
            return TransportFailure(e)
        return _httpx_snapshot(response)

    async def aclose(self) -> None:
        if self._owns_session:
            await self.session.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


class RequestsTransport:
    """Transport over a requests session."""

    def __init__(self, session: requests.Session | None = None, **options: Any):
        """
        Initialize the transport.

        Args:
            session: Session to send requests with; a new one is created if not given
            options: per-request options (timeout, verify, proxies, ...); a single
                `proxy` URL is used for both http and https
        """
        self._owns_session = session is None
        self.session = session or requests.Session()
        if proxy := options.pop("proxy", None):
            options.setdefault("proxies", {"http": proxy, "https": proxy})
        self.options = options

    def send(self, envelope: RequestEnvelope) -> TransportOutcome:
        body = envelope.body
        try:
            response = self.session.request(
                envelope.method,
                envelope.url,
                headers=envelope.headers,
                data=dict(body.fields) if body.is_multipart else body.content,
                files=list(body.files) or None,
                **self.options,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            return TransportFailure(e, _requests_snapshot(e.response))
        except requests.RequestException as e:
            logger.debug(f"Request to {envelope.url} failed: {e!r}")
            return TransportFailure(e)
        return _requests_snapshot(response)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _httpx_body(body: RequestBody) -> dict[str, Any]:
    if body.is_multipart:
        return {"data": dict(body.fields), "files": list(body.files)}
    return {"content": body.content}


def _httpx_snapshot(response: httpx.Response) -> HTTPResponse:
    return HTTPResponse(
        status_code=response.status_code,
        headers=dict(response.headers),
        content=response.content,
    )


def _requests_snapshot(response: requests.Response | None) -> HTTPResponse | None:
    if response is None:
        return None
    return HTTPResponse(
        status_code=response.status_code,
        headers=dict(response.headers),
        content=response.content,
    )
