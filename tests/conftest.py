"""Pytest configuration and fixtures"""
import os
from decimal import Decimal

import pytest

# Set test environment variables
os.environ.setdefault("CATALOG_API_URL", "https://catalog.test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from storefront.cart import CartStore  # noqa: E402
from storefront.catalog import CatalogError, Product  # noqa: E402


class FakeCatalog:
    """In-memory catalog; ids listed in `failing` raise like a network error."""

    def __init__(self, products: dict[str, Product]):
        self.products = products
        self.failing: set[str] = set()
        self.calls: list[str] = []
        self.closed = False

    async def get_product_by_id(self, product_id: str) -> Product:
        self.calls.append(product_id)
        if product_id in self.failing:
            raise CatalogError("Product catalog unavailable: timeout", product_id=product_id)
        product = self.products.get(product_id)
        if product is None:
            raise CatalogError("Product not found", product_id=product_id, status_code=404)
        return product

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def sample_product_payload():
    """Raw product as returned by the catalog API"""
    return {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "Volumizing mascara",
        "category": "beauty",
        "price": 9.99,
        "discountPercentage": 7.17,
        "rating": 4.94,
        "stock": 5,
        "brand": "Essence",
        "thumbnail": "https://cdn.test/products/1/thumbnail.png",
        "images": ["https://cdn.test/products/1/1.png"],
    }


@pytest.fixture
def products():
    """Catalog contents keyed by id"""
    return {
        "P1": Product(
            id="P1",
            name="Running Shoe",
            brand="Stride",
            price=Decimal("49.99"),
            image="https://cdn.test/p1.png",
            thumbnail="https://cdn.test/p1-thumb.png",
            in_stock=True,
            stock=12,
        ),
        "P2": Product(
            id="P2",
            name="Sport Socks",
            brand="Stride",
            price=Decimal("5.50"),
            image="https://cdn.test/p2.png",
            thumbnail=None,
            in_stock=True,
            stock=100,
        ),
        "P3": Product(
            id="P3",
            name="Water Bottle",
            brand=None,
            price=Decimal("12.00"),
            image=None,
            thumbnail=None,
            in_stock=False,
            stock=0,
        ),
    }


@pytest.fixture
def fake_catalog(products):
    """Catalog stub backed by the products fixture"""
    return FakeCatalog(products)


@pytest.fixture
def store(fake_catalog):
    """Fresh cart store per test"""
    return CartStore(fake_catalog)
