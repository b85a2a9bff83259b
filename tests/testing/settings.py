import os

from typing import Any, Callable, Iterator

import pytest

from gqlclient.settings import ClientSettings


ENV_PREFIX = "GQLCLIENT_"


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[ClientSettings]:
    """Ensure default values are set for ClientSettings."""
    for name in list(os.environ):
        if name.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(name)

    settings = ClientSettings()
    monkeypatch.setattr("gqlclient.settings.SETTINGS", settings)
    monkeypatch.setattr("gqlclient.cmdline.SETTINGS", settings)
    yield settings


@pytest.fixture
def override_setting(
    monkeypatch: pytest.MonkeyPatch, default_settings: ClientSettings
) -> Iterator[Callable[[str, Any], ClientSettings]]:
    """Function to override value for a setting."""

    def override(attr: str, value: Any) -> ClientSettings:
        monkeypatch.setattr(default_settings, attr, value)
        return default_settings

    yield override
