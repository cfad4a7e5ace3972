"""Cart store: in-memory carts keyed by identity."""
import asyncio
import uuid
from dataclasses import replace
from typing import Optional, TYPE_CHECKING

from storefront.errors import ERROR_PRODUCT_ID_REQUIRED, ERROR_QUANTITY_POSITIVE, ERROR_QUANTITY_REQUIRED
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from .errors import InvalidInputError, ItemNotFoundError, ProductNotFoundError
from .models import Cart, CartItem, CartSummary, EnrichedCart, EnrichedCartItem, ProductView

if TYPE_CHECKING:
    from storefront.catalog import CatalogClient

logger = get_logger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _new_item_id() -> str:
    return uuid.uuid4().hex


class CartStore:
    """
    Keeps one cart per identity for the lifetime of the process.

    Features:
    - Lines keyed by (product_id, size, color); repeated adds fold into one line
    - Name/price/image snapshot taken from the catalog at add time
    - Read view enriched with live catalog data, degrading per line

    Mutations of one identity are serialized by a per-identity lock held
    across the whole read-modify-write, including the catalog lookup in
    `add`. Different identities never wait on each other.

    Usage:
        store = CartStore(catalog)
        cart = await store.add("user-1", "42", quantity=2, size="M")
        view = await store.view("user-1")
    """

    def __init__(self, catalog: "CatalogClient"):
        self.catalog = catalog
        self._carts: dict[str, Cart] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, identity: str) -> asyncio.Lock:
        lock = self._locks.get(identity)
        if lock is None:
            lock = self._locks[identity] = asyncio.Lock()
        return lock

    def _get_or_create(self, identity: str) -> Cart:
        cart = self._carts.get(identity)
        if cart is None:
            cart = self._carts[identity] = Cart(identity=identity)
            logger.debug("Created cart for %s", sanitize_id_for_logging(identity))
        return cart

    async def get_or_create(self, identity: str) -> Cart:
        """Return the identity's cart, creating an empty one on first access."""
        return self._get_or_create(identity)

    async def view(self, identity: str) -> EnrichedCart:
        """
        Cart with live product data attached to each line.

        Lookups run concurrently. A line whose lookup fails is returned
        without product data; the read itself never fails on catalog
        errors. Stored cart state is not modified.
        """
        cart = self._get_or_create(identity)
        # Copy lines so a concurrent mutation can't change them mid-lookup
        items = [replace(item) for item in cart.items]
        created_at, updated_at = cart.created_at, cart.updated_at

        results = await asyncio.gather(
            *[self.catalog.get_product_by_id(item.product_id) for item in items],
            return_exceptions=True,
        )

        enriched = []
        for item, result in zip(items, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(
                    "Error fetching product %s for cart %s: %s",
                    sanitize_string_for_logging(item.product_id),
                    sanitize_id_for_logging(identity),
                    result,
                )
                enriched.append(EnrichedCartItem(item=item))
            else:
                enriched.append(EnrichedCartItem(item=item, product=ProductView.from_product(result)))

        snapshot = Cart(identity=identity, items=items, created_at=created_at, updated_at=updated_at)
        return EnrichedCart(
            identity=identity,
            items=enriched,
            total=snapshot.total,
            item_count=snapshot.item_count,
            created_at=created_at,
            updated_at=updated_at,
        )

    async def add(
        self,
        identity: str,
        product_id: Optional[str],
        quantity: int = 1,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Cart:
        """
        Add a product to the cart.

        Args:
            identity: Cart owner
            product_id: Catalog product id
            quantity: Units to add (positive)
            size: Optional variant size
            color: Optional variant color

        Returns:
            Updated cart

        Raises:
            InvalidInputError: product_id missing or quantity not positive
            ProductNotFoundError: catalog could not resolve product_id
        """
        if not product_id or not isinstance(product_id, str):
            raise InvalidInputError(ERROR_PRODUCT_ID_REQUIRED)
        if not _is_positive_int(quantity):
            raise InvalidInputError(ERROR_QUANTITY_POSITIVE)

        async with self._lock_for(identity):
            cart = self._get_or_create(identity)

            try:
                product = await self.catalog.get_product_by_id(product_id)
            except Exception as e:
                logger.info(
                    "Product %s unavailable for cart %s: %s",
                    sanitize_string_for_logging(product_id),
                    sanitize_id_for_logging(identity),
                    e,
                )
                raise ProductNotFoundError(product_id) from e

            existing_item = cart.find_line(product_id, size, color)
            if existing_item:
                existing_item.quantity += quantity
            else:
                cart.items.append(
                    CartItem(
                        id=_new_item_id(),
                        product_id=product_id,
                        name=product.name,
                        unit_price=product.price,
                        image=product.image,
                        quantity=quantity,
                        size=size,
                        color=color,
                    )
                )

            cart.touch()
            logger.info(
                "Added %s x %s to cart %s (lines=%s, total=%s)",
                quantity,
                sanitize_string_for_logging(product_id),
                sanitize_id_for_logging(identity),
                len(cart.items),
                cart.total,
            )
            return cart

    async def update_quantity(self, identity: str, item_id: str, quantity: Optional[int]) -> Cart:
        """
        Set the quantity of an existing line.

        Raises:
            InvalidInputError: quantity missing or not positive
            ItemNotFoundError: no line with item_id
        """
        if not _is_positive_int(quantity):
            raise InvalidInputError(ERROR_QUANTITY_REQUIRED)

        async with self._lock_for(identity):
            cart = self._get_or_create(identity)
            item = cart.find_item(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)

            item.quantity = quantity
            cart.touch()
            return cart

    async def remove(self, identity: str, item_id: str) -> Cart:
        """
        Delete a line, keeping the order of the rest.

        Raises:
            ItemNotFoundError: no line with item_id
        """
        async with self._lock_for(identity):
            cart = self._get_or_create(identity)
            item = cart.find_item(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)

            cart.items = [line for line in cart.items if line.id != item_id]
            cart.touch()
            logger.info(
                "Removed line %s from cart %s",
                sanitize_id_for_logging(item_id),
                sanitize_id_for_logging(identity),
            )
            return cart

    async def clear(self, identity: str) -> Cart:
        """Empty the cart."""
        async with self._lock_for(identity):
            cart = self._get_or_create(identity)
            cart.items = []
            cart.touch()
            return cart

    async def summary(self, identity: str) -> CartSummary:
        """Item count, total and number of distinct lines."""
        return self._get_or_create(identity).summary()


# Singleton instance
_cart_store: Optional[CartStore] = None


def get_cart_store() -> CartStore:
    """Get CartStore singleton wired to the default catalog client."""
    global _cart_store
    if _cart_store is None:
        from storefront.catalog import get_catalog_client
        _cart_store = CartStore(get_catalog_client())
    return _cart_store
