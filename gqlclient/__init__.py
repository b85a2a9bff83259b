# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

from .body import RequestBody, RequestEnvelope, build_body, build_headers, compose
from .client import AsyncClient, Client, classify
from .exceptions import (
    TRANSPORT_ERRORS,
    ConfigurationError,
    GraphQLClientError,
    MethodNotSupportedError,
    QueryError,
)
from .models import File, GraphQLError, HTTPResponse, Results
from .query import BuiltQuery, QuerySource, RawQuery, resolve_query
from .settings import ClientSettings
from .transport import (
    AsyncHTTPXTransport,
    HTTPXTransport,
    RequestsTransport,
    TransportFailure,
)


__version__ = "0.1.0"

__all__ = [
    "AsyncClient",
    "AsyncHTTPXTransport",
    "BuiltQuery",
    "Client",
    "ClientSettings",
    "ConfigurationError",
    "File",
    "GraphQLClientError",
    "GraphQLError",
    "HTTPResponse",
    "HTTPXTransport",
    "MethodNotSupportedError",
    "QueryError",
    "QuerySource",
    "RawQuery",
    "RequestBody",
    "RequestEnvelope",
    "RequestsTransport",
    "Results",
    "TRANSPORT_ERRORS",
    "TransportFailure",
    "build_body",
    "build_headers",
    "classify",
    "compose",
    "resolve_query",
]
