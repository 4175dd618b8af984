"""Pytest configuration and shared fixtures."""

import pytest

from sample_schema import CONFIG_CSV, ITEMS_CSV, FakeSheetsClient, GameData


@pytest.fixture
def fake_client() -> FakeSheetsClient:
    """A client serving the Items and Config pages."""
    return FakeSheetsClient({"Items": ITEMS_CSV, "Config": CONFIG_CSV})


@pytest.fixture
def container() -> GameData:
    """An empty container bound to a test document."""
    return GameData(document_id="doc-123")


# Configure pytest-asyncio
def pytest_configure(config):
    """Configure pytest with asyncio settings."""
    config.addinivalue_line("markers", "asyncio: mark test as async")
