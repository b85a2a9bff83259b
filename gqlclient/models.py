# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

import json

from pathlib import Path
from types import SimpleNamespace
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import QueryError


class File(BaseModel):
    """A file uploaded through the GraphQL multipart request convention."""

    model_config = ConfigDict(frozen=True)

    gql_type: str = Field(
        ..., description="GraphQL type of the variable the file is bound to, e.g. 'Upload!'"
    )
    contents: bytes = Field(..., description="Raw file content, sent byte-exact")
    filename: str = Field(..., description="Filename reported in the multipart part")

    @classmethod
    def from_path(cls, path: str | Path, gql_type: str = "Upload") -> Self:
        """
        Load a file from disk.

        Args:
            path: Location of the file
            gql_type: GraphQL type of the variable the file is bound to

        Returns:
            File with the content read in memory
        """
        path = Path(path)
        return cls(gql_type=gql_type, contents=path.read_bytes(), filename=path.name)


class GraphQLError(BaseModel):
    """GraphQL error information from query execution."""

    message: str = Field(..., description="Error message describing what went wrong")
    locations: list[dict[str, Any]] | None = Field(
        None, description="Source locations where the error occurred (line/column)"
    )
    path: list[str | int] | None = Field(
        None, description="Path to the field in the query that caused the error"
    )
    extensions: dict[str, Any] | None = Field(
        None, description="Additional error metadata and debugging information"
    )


class HTTPResponse(BaseModel):
    """Transport-neutral snapshot of an HTTP response."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    content: bytes = b""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Results:
    """
    Outcome of a GraphQL request.

    The response body must decode to a JSON object carrying at least one of the
    'data' or 'errors' keys, otherwise QueryError is raised. GraphQL errors are
    exposed through `errors` and `has_errors()`, they are never raised.
    """

    def __init__(self, response: HTTPResponse, as_dict: bool = False):
        self._response = response
        self._as_dict = as_dict

        body = response.text
        try:
            # bytes, so that the encoding is detected, BOM included
            decoded = json.loads(response.content)
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise QueryError("Response body is not valid JSON", body)
        if not isinstance(decoded, dict):
            raise QueryError("Response body is not a JSON object", body)
        if "data" not in decoded and "errors" not in decoded:
            raise QueryError("GraphQL response must contain either 'data' or 'errors'", body)

        self._errors = None
        if (raw_errors := decoded.get("errors")) is not None:
            try:
                self._errors = [GraphQLError(**error) for error in raw_errors]
            except (TypeError, ValidationError):
                raise QueryError("GraphQL response has malformed 'errors'", body)

        self._results = decoded if as_dict else _to_namespace(decoded)

    @property
    def response(self) -> HTTPResponse:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def response_body(self) -> str:
        return self._response.text

    @property
    def as_dict(self) -> bool:
        return self._as_dict

    @property
    def results(self) -> dict[str, Any] | SimpleNamespace:
        """The whole decoded response body."""
        return self._results

    @property
    def data(self) -> Any:
        if self._as_dict:
            return self._results.get("data")
        return getattr(self._results, "data", None)

    @property
    def errors(self) -> list[GraphQLError] | None:
        return self._errors

    def has_errors(self) -> bool:
        return bool(self._errors)

    def reformat(self, as_dict: bool) -> "Results":
        """Return the same results decoded as dicts or attribute objects."""
        if as_dict == self._as_dict:
            return self
        return Results(self._response, as_dict)

    def __repr__(self) -> str:
        return f"Results(status_code={self.status_code}, has_errors={self.has_errors()})"


def _to_namespace(value: Any) -> Any:
    if isinstance(value, dict):
        return SimpleNamespace(**{k: _to_namespace(v) for k, v in value.items()})
    if isinstance(value, list):
        return [_to_namespace(v) for v in value]
    return value
