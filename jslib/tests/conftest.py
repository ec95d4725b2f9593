"""Pytest configuration and fixtures."""

from collections.abc import Callable
from unittest.mock import patch

import httpx
import pytest

from jslib import config


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild settings from the (monkeypatched) environment in every test."""
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def mock_transport():
    """Route fetch() through an httpx.MockTransport built from a handler.

    The client keeps the options fetch() passes, so redirect handling is real.
    """
    patchers = []
    real_client = httpx.AsyncClient

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> None:
        transport = httpx.MockTransport(handler)
        patcher = patch(
            "jslib.fetch.httpx.AsyncClient",
            side_effect=lambda **kwargs: real_client(transport=transport, **kwargs),
        )
        patcher.start()
        patchers.append(patcher)

    yield install

    for patcher in patchers:
        patcher.stop()
