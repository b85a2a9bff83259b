# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

"""
Request body construction, following the GraphQL multipart request convention
when files are attached:

https://github.com/jaydenseric/graphql-multipart-request-spec
"""

import json

from collections.abc import Mapping
from typing import Any, NamedTuple

from .models import File


CONTENT_TYPE = "Content-Type"
JSON_CONTENT_TYPE = "application/json"


class RequestBody(NamedTuple):
    """Either a JSON document or the parts of a multipart form."""

    content: bytes | None = None
    fields: tuple[tuple[str, str], ...] = ()
    files: tuple[tuple[str, tuple[str, bytes]], ...] = ()

    @property
    def is_multipart(self) -> bool:
        return self.content is None


class RequestEnvelope(NamedTuple):
    """The single outbound request built for a call."""

    method: str
    url: str
    headers: dict[str, str]
    body: RequestBody


def build_body(
    query: str,
    variables: Mapping[str, Any] | None = None,
    files: Mapping[str, File] | None = None,
) -> RequestBody:
    """
    Build the request body for a query.

    Args:
        query: GraphQL document text
        variables: Variables for the query; empty or missing ones are sent as {}
        files: Files to upload, keyed by the variable they are bound to

    Returns:
        A JSON body, or a multipart body when there are files
    """
    operations = _dumps({"query": query, "variables": dict(variables or {})})
    if not files:
        return RequestBody(content=operations.encode())

    upload_map = {key: [f"variables.{key}"] for key in files}
    return RequestBody(
        fields=(("operations", operations), ("map", _dumps(upload_map))),
        files=tuple((key, (file.filename, file.contents)) for key, file in files.items()),
    )


def build_headers(*layers: Mapping[str, str] | None, multipart: bool = False) -> dict[str, str]:
    """
    Build request headers from layers applied in order, later ones winning.

    The JSON content type is always set last, unless the body is multipart: then
    any content type is dropped so that the multipart encoder can set its own,
    with the boundary.
    """
    headers: dict[str, str] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            _discard(headers, name)
            headers[name] = value

    _discard(headers, CONTENT_TYPE)
    if not multipart:
        headers[CONTENT_TYPE] = JSON_CONTENT_TYPE
    return headers


def compose(
    url: str,
    query: str,
    variables: Mapping[str, Any] | None = None,
    files: Mapping[str, File] | None = None,
    headers: Mapping[str, str] | None = None,
) -> RequestEnvelope:
    """Build the POST request for a query."""
    body = build_body(query, variables, files)
    return RequestEnvelope(
        method="POST",
        url=url,
        headers=build_headers(headers, multipart=body.is_multipart),
        body=body,
    )


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def _discard(headers: dict[str, str], name: str) -> None:
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]
