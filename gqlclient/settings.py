# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client settings."""

    model_config = SettingsConfigDict(
        env_prefix="gqlclient_",
        validate_assignment=True,
    )

    endpoint_url: str | None = Field(
        default=None,
        description="URL of the GraphQL endpoint",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra HTTP headers sent with every request",
    )
    request_method: str = Field(
        default="POST",
        description="HTTP method; only POST is supported",
    )
    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
    )
    verify: bool = Field(
        default=True,
        description="Verify TLS certificates",
    )
    proxy: str | None = Field(
        default=None,
        description="Proxy URL for all requests",
    )

    def http_options(self) -> dict[str, Any]:
        """Options passed through to the transport."""
        options: dict[str, Any] = {"timeout": self.timeout, "verify": self.verify}
        if self.proxy:
            options["proxy"] = self.proxy
        return options


SETTINGS = ClientSettings()
