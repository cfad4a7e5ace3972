"""Cart package: models, errors, and the in-memory store."""
from .models import CartItem, Cart, CartSummary, ProductView, EnrichedCartItem, EnrichedCart
from .errors import CartError, InvalidInputError, ProductNotFoundError, ItemNotFoundError
from .service import CartStore, get_cart_store

__all__ = [
    "CartItem",
    "Cart",
    "CartSummary",
    "ProductView",
    "EnrichedCartItem",
    "EnrichedCart",
    "CartError",
    "InvalidInputError",
    "ProductNotFoundError",
    "ItemNotFoundError",
    "CartStore",
    "get_cart_store",
]
