"""Cart error kinds.

All derive from ValueError so callers that only care about "the request
was bad" can catch one type.
"""
from storefront.errors import ERROR_ITEM_NOT_FOUND, ERROR_PRODUCT_NOT_FOUND


class CartError(ValueError):
    """Base class for cart operation failures."""


class InvalidInputError(CartError):
    """Missing or malformed required field."""


class ProductNotFoundError(CartError):
    """Catalog could not resolve the product during add."""

    def __init__(self, product_id: str, message: str = ERROR_PRODUCT_NOT_FOUND):
        super().__init__(message)
        self.product_id = product_id


class ItemNotFoundError(CartError):
    """Referenced line id is not in the identity's cart."""

    def __init__(self, item_id: str, message: str = ERROR_ITEM_NOT_FOUND):
        super().__init__(message)
        self.item_id = item_id
