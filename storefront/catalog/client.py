"""Catalog Client - third-party product catalog over HTTP.

Resolves product ids to `Product` models. Any failure (unknown id,
HTTP error, network error, malformed payload) raises `CatalogError`;
the client never returns a partial or empty product.
"""

import os
from urllib.parse import quote
from typing import Optional

import httpx

from storefront.errors import (
    ERROR_CATALOG_BAD_PAYLOAD,
    ERROR_CATALOG_UNAVAILABLE,
    ERROR_PRODUCT_NOT_FOUND,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from .models import Product

logger = get_logger(__name__)

DEFAULT_CATALOG_API_URL = "https://dummyjson.com"


class CatalogError(ValueError):
    """Product could not be resolved by the catalog."""

    def __init__(self, message: str, product_id: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.product_id = product_id
        self.status_code = status_code


class CatalogClient:
    """Async client for the product catalog API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (
            base_url or os.environ.get("CATALOG_API_URL", DEFAULT_CATALOG_API_URL)
        ).rstrip("/")
        self.timeout = timeout if timeout is not None else float(os.environ.get("CATALOG_TIMEOUT", "10"))
        self._transport = transport

        # HTTP client (lazy init)
        self._http_client: httpx.AsyncClient | None = None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of shared httpx client with timeouts."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout, connect=5.0),
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
                transport=self._transport,
            )
        return self._http_client

    async def get_product_by_id(self, product_id: str) -> Product:
        """
        Fetch a single product.

        Args:
            product_id: Catalog product id

        Returns:
            Normalized Product

        Raises:
            CatalogError: On unknown id, HTTP/network failure or bad payload
        """
        if not product_id or str(product_id) in (".", ".."):
            raise CatalogError(ERROR_PRODUCT_NOT_FOUND, product_id=product_id)

        client = await self._get_http_client()
        safe_id = sanitize_string_for_logging(str(product_id))

        try:
            # Id is a single escaped path segment
            response = await client.get(f"/products/{quote(str(product_id), safe='')}")
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                logger.debug("Catalog has no product %s", safe_id)
                raise CatalogError(ERROR_PRODUCT_NOT_FOUND, product_id=product_id, status_code=status) from e
            logger.warning("Catalog API error %s for product %s", status, safe_id)
            raise CatalogError(
                f"{ERROR_CATALOG_UNAVAILABLE}: HTTP {status}", product_id=product_id, status_code=status
            ) from e
        except httpx.RequestError as e:
            logger.warning("Catalog network error for product %s: %s", safe_id, e)
            raise CatalogError(f"{ERROR_CATALOG_UNAVAILABLE}: {e!s}", product_id=product_id) from e
        except ValueError as e:
            # response.json() on a non-JSON body
            raise CatalogError(ERROR_CATALOG_BAD_PAYLOAD, product_id=product_id) from e

        if not isinstance(payload, dict):
            raise CatalogError(ERROR_CATALOG_BAD_PAYLOAD, product_id=product_id)

        try:
            return Product.from_api(payload)
        except ValueError as e:
            logger.warning("Malformed catalog payload for product %s: %s", safe_id, e)
            raise CatalogError(ERROR_CATALOG_BAD_PAYLOAD, product_id=product_id) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


# Singleton instance
_catalog_client: Optional[CatalogClient] = None


def get_catalog_client() -> CatalogClient:
    """Get CatalogClient singleton."""
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogClient()
    return _catalog_client
