"""
Shared pytest fixtures: sample page markup, settings, mock HTTP clients and
a console that records the printed report.
"""

import io
import logging

import httpx
import pytest
from rich.console import Console

from tests.markup import make_card, make_page
from utils.config import Settings, get_settings

TEST_URL = "https://pollen.example.test/en/nl/leiden/health-activities"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(PAGE_URL=TEST_URL)


@pytest.fixture
def sample_html() -> str:
    return make_page(
        make_card("Tree Pollen", "Low"),
        make_card("UV Index", "High"),
        make_card("Grass Pollen", "Moderate"),
        make_card("Mold", "Very High"),
    )


@pytest.fixture
def mock_client():
    """Factory building an httpx client backed by a handler function."""
    clients: list[httpx.Client] = []

    def factory(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=80, color_system=None, legacy_windows=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level

    yield root

    root.handlers[:] = handlers
    root.setLevel(level)
