"""
Common test fixtures and configuration.
"""

import pytest

from gqlclient.models import File

from .testing.http import mock_http
from .testing.settings import default_settings, override_setting


# add imported fixtures to __all__ so they're considered in use in the module
__all__ = ["mock_http", "default_settings", "override_setting"]


@pytest.fixture
def text_file() -> File:
    return File(gql_type="Upload!", contents=b"abc", filename="a.txt")


@pytest.fixture
def binary_file() -> File:
    return File(gql_type="Upload", contents=bytes(range(256)), filename="blob.bin")
