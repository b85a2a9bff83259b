# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

import json
import logging
import sys

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    CliApp,
    CliPositionalArg,
    CliSubCommand,
    SettingsError,
)

from .client import Client
from .exceptions import TRANSPORT_ERRORS, GraphQLClientError
from .models import File
from .query import RawQuery
from .settings import SETTINGS


class RunCommand(BaseModel):
    """Run a query against the GraphQL endpoint"""

    query_file: CliPositionalArg[str] = Field(
        description="file containing the GraphQL query, '-' for stdin"
    )
    variables: dict[str, Any] = Field(default_factory=dict, description="query variables as JSON")
    upload: list[str] = Field(
        default_factory=list,
        description=(
            "file to upload for a variable, as KEY=PATH; "
            "double-quote it when PATH has spaces around a comma"
        ),
    )
    endpoint_url: str | None = Field(None, description="GraphQL endpoint URL")
    verbose: bool = Field(False, description="log requests to stderr")

    @field_validator("upload", mode="before")
    @classmethod
    def join_upload_paths(cls, value: Any) -> Any:
        # list values are split at commas, which a path may contain
        if not isinstance(value, list):
            return value
        entries: list[Any] = []
        for entry in value:
            if entries and "=" not in str(entry):
                entries[-1] = f"{entries[-1]},{entry}"
            else:
                entries.append(entry)
        return entries

    @field_validator("upload")
    @classmethod
    def validate_upload(cls, value: list[str]) -> list[str]:
        for entry in value:
            key, sep, path = entry.partition("=")
            if not (key and sep and path):
                raise ValueError(f"Upload must be in KEY=PATH format: {entry!r}")
        return value

    def cli_cmd(self) -> None:
        if self.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

        settings = SETTINGS
        if self.endpoint_url:
            settings = SETTINGS.model_copy(update={"endpoint_url": self.endpoint_url})
        query = RawQuery(self.read_query(), files=self.uploads())

        with Client.from_settings(settings) as client:
            results = client.run_query(query, as_dict=True, variables=self.variables)

        print(json.dumps(results.results, indent=2))
        if results.has_errors():
            sys.exit(1)

    def read_query(self) -> str:
        if self.query_file == "-":
            return sys.stdin.read()
        return Path(self.query_file).read_text()

    def uploads(self) -> dict[str, File]:
        files = {}
        for entry in self.upload:
            key, _, path = entry.partition("=")
            files[key] = File.from_path(path)
        return files


class CLIArguments(
    BaseSettings,
    cli_parse_args=True,
    cli_kebab_case=True,
    cli_implicit_flags=True,
    cli_use_class_docs_for_groups=True,
):
    """Command line arguments."""

    run: CliSubCommand[RunCommand]

    def cli_cmd(self) -> None:
        CliApp.run_subcommand(self)


def main() -> None:
    """Main entry point for the command line."""
    try:
        CliApp.run(CLIArguments)
    except (ValidationError, SettingsError, GraphQLClientError, OSError, *TRANSPORT_ERRORS) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
