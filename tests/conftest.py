# tests/conftest.py

"""Shared pytest fixtures for the storefront tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def no_network_images() -> Generator[None, None, None]:
    """Disable real image downloads so no test touches the network."""
    with patch(
        "src.config.settings.Settings.IMAGE_FETCH_ENABLED", False
    ):
        yield
