# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

"""
GraphQL client: builds one POST request per query and classifies the outcome.
"""

import logging

from collections.abc import Mapping
from typing import Any, Self

from .body import RequestEnvelope, build_headers, compose
from .exceptions import ConfigurationError, MethodNotSupportedError
from .models import File, Results
from .query import QuerySource, resolve_query
from .settings import ClientSettings
from .transport import (
    AsyncHTTPXTransport,
    AsyncTransport,
    HTTPXTransport,
    Transport,
    TransportFailure,
    TransportOutcome,
)


logger = logging.getLogger(__name__)


def classify(outcome: TransportOutcome, as_dict: bool = False) -> Results:
    """
    Turn a transport outcome into results.

    GraphQL servers answer 400 for queries that fail parsing or validation, with
    the errors in a regular GraphQL body, so that status is not a failure. Any
    other transport failure is re-raised unchanged.

    Args:
        outcome: Response or failure returned by the transport
        as_dict: Decode results as dicts rather than attribute objects

    Returns:
        Results for the response
    """
    if isinstance(outcome, TransportFailure):
        response = outcome.response
        if response is None or response.status_code != 400:
            raise outcome.cause
        logger.debug("Handling HTTP 400 response as a GraphQL result")
        outcome = response
    return Results(outcome, as_dict)


class _BaseClient:
    def __init__(
        self,
        endpoint_url: str,
        authorization_headers: Mapping[str, str] | None = None,
        http_options: Mapping[str, Any] | None = None,
        request_method: str = "POST",
    ):
        if request_method != "POST":
            raise MethodNotSupportedError(request_method)

        options = dict(http_options or {})
        # headers are set on each request, not on the transport
        self.http_headers = build_headers(authorization_headers, options.pop("headers", None))
        self.http_options = options
        self.endpoint_url = endpoint_url

    @classmethod
    def _settings_args(cls, settings: ClientSettings) -> dict[str, Any]:
        if not settings.endpoint_url:
            raise ConfigurationError("An endpoint URL is required")
        return {
            "endpoint_url": settings.endpoint_url,
            "authorization_headers": settings.headers,
            "http_options": settings.http_options(),
            "request_method": settings.request_method,
        }

    def _compose(
        self,
        query_string: str,
        variables: Mapping[str, Any] | None,
        files: Mapping[str, File] | None,
    ) -> RequestEnvelope:
        envelope = compose(self.endpoint_url, query_string, variables, files, self.http_headers)
        if envelope.body.is_multipart:
            logger.debug(f"POST {self.endpoint_url} (multipart, {len(envelope.body.files)} files)")
        else:
            logger.debug(f"POST {self.endpoint_url} (json)")
        return envelope


class Client(_BaseClient):
    """
    Client for a GraphQL endpoint.

    Examples:
        ```python
        with Client("https://api.example.com/graphql", {"Authorization": "Bearer x"}) as client:
            results = client.run_raw_query("{ ping }")
            if not results.has_errors():
                print(results.data.ping)
        ```
    """

    def __init__(
        self,
        endpoint_url: str,
        authorization_headers: Mapping[str, str] | None = None,
        http_options: Mapping[str, Any] | None = None,
        transport: Transport | None = None,
        request_method: str = "POST",
    ):
        """
        Initialize the client.

        Args:
            endpoint_url: URL of the GraphQL endpoint
            authorization_headers: Headers sent with every request
            http_options: Transport options; a "headers" entry is merged into the
                request headers, the rest is passed to the default transport
            transport: Transport to send requests with, HTTPXTransport by default
            request_method: HTTP method, must be POST
        """
        super().__init__(endpoint_url, authorization_headers, http_options, request_method)
        self.transport = transport or HTTPXTransport(**self.http_options)

    @classmethod
    def from_settings(cls, settings: ClientSettings, transport: Transport | None = None) -> Self:
        return cls(transport=transport, **cls._settings_args(settings))

    def run_query(
        self,
        query: QuerySource | str,
        as_dict: bool = False,
        variables: Mapping[str, Any] | None = None,
    ) -> Results:
        """
        Run a query, with the files attached to it.

        Args:
            query: RawQuery, BuiltQuery or query string
            as_dict: Decode results as dicts rather than attribute objects
            variables: Variables for the query

        Returns:
            Results of the query, including any GraphQL errors
        """
        query_string, files = resolve_query(query)
        return self.run_raw_query(query_string, as_dict, variables, files)

    def run_raw_query(
        self,
        query_string: str,
        as_dict: bool = False,
        variables: Mapping[str, Any] | None = None,
        files: Mapping[str, File] | None = None,
    ) -> Results:
        """
        Run a query string.

        Args:
            query_string: GraphQL document text
            as_dict: Decode results as dicts rather than attribute objects
            variables: Variables for the query
            files: Files to upload, keyed by the variable they are bound to

        Returns:
            Results of the query, including any GraphQL errors
        """
        envelope = self._compose(query_string, variables, files)
        return classify(self.transport.send(envelope), as_dict)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncClient(_BaseClient):
    """Asynchronous client for a GraphQL endpoint, see Client."""

    def __init__(
        self,
        endpoint_url: str,
        authorization_headers: Mapping[str, str] | None = None,
        http_options: Mapping[str, Any] | None = None,
        transport: AsyncTransport | None = None,
        request_method: str = "POST",
    ):
        super().__init__(endpoint_url, authorization_headers, http_options, request_method)
        self.transport = transport or AsyncHTTPXTransport(**self.http_options)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, transport: AsyncTransport | None = None
    ) -> Self:
        return cls(transport=transport, **cls._settings_args(settings))

    async def run_query(
        self,
        query: QuerySource | str,
        as_dict: bool = False,
        variables: Mapping[str, Any] | None = None,
    ) -> Results:
        query_string, files = resolve_query(query)
        return await self.run_raw_query(query_string, as_dict, variables, files)

    async def run_raw_query(
        self,
        query_string: str,
        as_dict: bool = False,
        variables: Mapping[str, Any] | None = None,
        files: Mapping[str, File] | None = None,
    ) -> Results:
        envelope = self._compose(query_string, variables, files)
        return classify(await self.transport.send(envelope), as_dict)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
