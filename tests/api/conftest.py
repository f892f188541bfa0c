"""Shared fixtures for API tests."""

from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from catalog_browser.application.browser_service import CatalogBrowser, get_catalog_browser
from catalog_browser.domain.models import Product
from catalog_browser.infrastructure.catalog_client import CatalogClient, get_catalog_client
from catalog_browser.main import app


@pytest.fixture
def browser(catalog: list[Product]) -> CatalogBrowser:
    """Fresh browser with the mixed catalog loaded."""
    browser = CatalogBrowser()
    browser.load_catalog(catalog)
    return browser


@pytest.fixture
def catalog_client() -> MagicMock:
    """Catalog client that never touches the network."""
    client = MagicMock(spec=CatalogClient)
    client.list_products = AsyncMock()
    client.get_product = AsyncMock()
    return client


@pytest.fixture
def client(browser: CatalogBrowser, catalog_client: MagicMock) -> Iterator[TestClient]:
    """Create test client bound to the test browser and catalog client."""
    app.dependency_overrides[get_catalog_browser] = lambda: browser
    app.dependency_overrides[get_catalog_client] = lambda: catalog_client
    yield TestClient(app)
    app.dependency_overrides.clear()
