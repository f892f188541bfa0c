"""Shared fixtures for catalog browser tests."""

from decimal import Decimal
from typing import Callable

import pytest

from catalog_browser.domain.models import Product, Rating

ProductFactory = Callable[..., Product]


@pytest.fixture
def product_factory() -> ProductFactory:
    """Build products with sensible defaults."""

    def _make(
        id: int,
        price: str | int = "10",
        category: str = "electronics",
        rate: str = "4.0",
        count: int = 100,
        title: str | None = None,
    ) -> Product:
        return Product(
            id=id,
            title=title or f"Product {id}",
            price=Decimal(str(price)),
            description=f"Description of product {id}",
            category=category,
            image=f"https://example.test/img/{id}.jpg",
            rating=Rating(rate=Decimal(rate), count=count),
        )

    return _make


@pytest.fixture
def catalog(product_factory: ProductFactory) -> list[Product]:
    """Small mixed catalog in fetch order."""
    return [
        product_factory(1, price="109.95", category="men's clothing", rate="3.9", count=120),
        product_factory(2, price="22.30", category="men's clothing", rate="4.1", count=259),
        product_factory(3, price="55.99", category="men's clothing", rate="4.7", count=500),
        product_factory(4, price="695", category="jewelery", rate="4.6", count=400),
        product_factory(5, price="9.99", category="electronics", rate="1.9", count=70),
        product_factory(6, price="50", category="electronics", rate="3.0", count=259),
        product_factory(7, price="999.99", category="women's clothing", rate="2.2", count=100),
    ]


@pytest.fixture
def scenario_catalog(product_factory: ProductFactory) -> list[Product]:
    """Three products priced 30, 75 and 500 in categories A, A, B."""
    return [
        product_factory(1, price=30, category="A", rate="4.5"),
        product_factory(2, price=75, category="A", rate="3.0"),
        product_factory(3, price=500, category="B", rate="4.8"),
    ]


def api_payload(product_id: int = 1, **overrides: object) -> dict:
    """Catalog service JSON for a single product."""
    data = {
        "id": product_id,
        "title": "Fjallraven - Foldsack No. 1 Backpack",
        "price": 109.95,
        "description": "Your perfect pack for everyday use",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    }
    data.update(overrides)
    return data


@pytest.fixture
def payload_factory() -> Callable[..., dict]:
    """Build catalog service product payloads."""
    return api_payload
