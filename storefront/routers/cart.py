"""
Cart Router

Shopping cart endpoints. Every successful response has the shape
``{"success": true, "message": ..., "data": {...}}``; errors are turned
into ``{"success": false, "message": ...}`` by the app's HTTPException
handler.

Identity comes from the X-User-Id header set by the auth layer, the
``user_id`` query parameter, or the ``user_id`` body field.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import CartStore, InvalidInputError, ItemNotFoundError, ProductNotFoundError
from storefront.errors import ERROR_INTERNAL
from storefront.logging import get_logger
from .deps import get_cart_store_lazy, get_request_identity, resolve_identity
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


def _ok(message: str, **data) -> dict:
    return {"success": True, "message": message, "data": data}


def _raise_for_cart_error(e: Exception, action: str):
    """Map cart errors to HTTP statuses; anything else is a 500."""
    if isinstance(e, InvalidInputError):
        raise HTTPException(status_code=400, detail=str(e))
    if isinstance(e, (ProductNotFoundError, ItemNotFoundError)):
        raise HTTPException(status_code=404, detail=str(e))
    logger.error(f"{action} error: {e}", exc_info=True)
    raise HTTPException(status_code=500, detail=ERROR_INTERNAL)


@router.get("")
async def get_cart(
    identity: Optional[str] = Depends(get_request_identity),
    store: CartStore = Depends(get_cart_store_lazy),
):
    """Get cart with live product details."""
    cart_identity = resolve_identity(identity)
    try:
        view = await store.view(cart_identity)
    except Exception as e:
        _raise_for_cart_error(e, "Get cart")
    return _ok("Cart retrieved successfully", cart=view.to_dict())


@router.post("/add")
async def add_to_cart(
    request: AddToCartRequest,
    identity: Optional[str] = Depends(get_request_identity),
    store: CartStore = Depends(get_cart_store_lazy),
):
    """Add item to cart (folds into an existing line with the same variant)."""
    cart_identity = resolve_identity(identity, request.user_id)
    product_id = str(request.product_id) if request.product_id is not None else None
    try:
        cart = await store.add(
            cart_identity,
            product_id,
            quantity=request.quantity,
            size=request.size,
            color=request.color,
        )
    except Exception as e:
        _raise_for_cart_error(e, "Add to cart")
    return _ok("Item added to cart successfully", cart=cart.to_dict())


@router.put("/update/{item_id}")
async def update_cart_item(
    item_id: str,
    request: Optional[UpdateCartItemRequest] = None,
    identity: Optional[str] = Depends(get_request_identity),
    store: CartStore = Depends(get_cart_store_lazy),
):
    """Set cart item quantity."""
    body = request or UpdateCartItemRequest()
    cart_identity = resolve_identity(identity, body.user_id)
    try:
        cart = await store.update_quantity(cart_identity, item_id, body.quantity)
    except Exception as e:
        _raise_for_cart_error(e, "Update cart item")
    return _ok("Cart item updated successfully", cart=cart.to_dict())


@router.delete("/remove/{item_id}")
async def remove_cart_item(
    item_id: str,
    identity: Optional[str] = Depends(get_request_identity),
    store: CartStore = Depends(get_cart_store_lazy),
):
    """Remove item from cart."""
    cart_identity = resolve_identity(identity)
    try:
        cart = await store.remove(cart_identity, item_id)
    except Exception as e:
        _raise_for_cart_error(e, "Remove from cart")
    return _ok("Item removed from cart successfully", cart=cart.to_dict())


@router.delete("/clear")
async def clear_cart(
    identity: Optional[str] = Depends(get_request_identity),
    store: CartStore = Depends(get_cart_store_lazy),
):
    """Empty the cart."""
    cart_identity = resolve_identity(identity)
    try:
        cart = await store.clear(cart_identity)
    except Exception as e:
        _raise_for_cart_error(e, "Clear cart")
    return _ok("Cart cleared successfully", cart=cart.to_dict())


@router.get("/summary")
async def get_cart_summary(
    identity: Optional[str] = Depends(get_request_identity),
    store: CartStore = Depends(get_cart_store_lazy),
):
    """Item count, total and number of distinct lines."""
    cart_identity = resolve_identity(identity)
    try:
        summary = await store.summary(cart_identity)
    except Exception as e:
        _raise_for_cart_error(e, "Get cart summary")
    return _ok("Cart summary retrieved successfully", summary=summary.to_dict())
