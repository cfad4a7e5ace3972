"""Catalog package: product model and HTTP client."""
from .models import Product
from .client import CatalogClient, CatalogError, get_catalog_client

__all__ = [
    "Product",
    "CatalogClient",
    "CatalogError",
    "get_catalog_client",
]
