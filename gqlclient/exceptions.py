# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

"""
Errors raised by the GraphQL client.

Transport failures are not wrapped: the exceptions raised by the HTTP library
(see TRANSPORT_ERRORS) reach the caller unchanged.
"""

import httpx
import requests


# Exceptions raised by the supported transports for connectivity problems and
# non-400 HTTP error statuses.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (httpx.HTTPError, requests.RequestException)


class GraphQLClientError(Exception):
    """Base class for errors raised by the client itself."""


class ConfigurationError(GraphQLClientError):
    """The client was configured with unsupported options."""


class MethodNotSupportedError(ConfigurationError):
    """Only POST requests are supported."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method {method!r} is not supported, only 'POST' requests are allowed")


class QueryError(GraphQLClientError):
    """The response body is not a usable GraphQL response."""

    def __init__(self, message: str, response_body: str = ""):
        self.response_body = response_body
        super().__init__(f"{message}: {response_body}" if response_body else message)
