# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

"""
Query sources accepted by the client.

A query is either raw GraphQL text (RawQuery) or a graphql-core document
(BuiltQuery). Both resolve to the query string and its attached files.
"""

from collections.abc import Mapping
from typing import Protocol, Self, runtime_checkable

from graphql import DocumentNode, parse, print_ast

from .models import File


@runtime_checkable
class QuerySource(Protocol):
    """Anything that can be rendered to a query string with attached files."""

    def to_query_string(self) -> str: ...

    def to_files(self) -> dict[str, File]: ...


class RawQuery:
    """An already-serialized GraphQL document."""

    def __init__(self, query: str, files: Mapping[str, File] | None = None):
        self._query = query
        self._files = dict(files or {})

    def to_query_string(self) -> str:
        return self._query

    def to_files(self) -> dict[str, File]:
        return dict(self._files)

    def __str__(self) -> str:
        return self._query


class BuiltQuery:
    """A GraphQL document built or parsed with graphql-core."""

    def __init__(self, document: DocumentNode, files: Mapping[str, File] | None = None):
        self._document = document
        self._files = dict(files or {})

    @classmethod
    def parse(cls, source: str, files: Mapping[str, File] | None = None) -> Self:
        """
        Parse GraphQL text into a document.

        Only the syntax is checked, no schema is involved.

        Args:
            source: GraphQL document text
            files: Files to attach, keyed by variable name

        Returns:
            The built query
        """
        return cls(parse(source, no_location=True), files)

    @property
    def document(self) -> DocumentNode:
        return self._document

    def to_query_string(self) -> str:
        return print_ast(self._document)

    def to_files(self) -> dict[str, File]:
        return dict(self._files)

    def __str__(self) -> str:
        return self.to_query_string()


def resolve_query(query: QuerySource | str) -> tuple[str, dict[str, File]]:
    """Resolve a query source to its query string and attached files."""
    if isinstance(query, str):
        return query, {}
    if isinstance(query, QuerySource):
        return query.to_query_string(), query.to_files()
    raise TypeError(
        f"Expected a query string, RawQuery or BuiltQuery, got {type(query).__name__}"
    )
