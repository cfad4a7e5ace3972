"""
Shared Dependencies for Routers

Lazy-loaded singletons and request-level helpers.
"""

from typing import Optional, TYPE_CHECKING

from fastapi import Header, HTTPException, Query

from storefront.errors import ERROR_IDENTITY_REQUIRED

if TYPE_CHECKING:
    from storefront.cart import CartStore


# ==================== LAZY SINGLETONS ====================

_cart_store: Optional["CartStore"] = None


def get_cart_store_lazy() -> "CartStore":
    """Get or create CartStore singleton (lazy loaded)"""
    global _cart_store
    if _cart_store is None:
        from storefront.cart import get_cart_store
        _cart_store = get_cart_store()
    return _cart_store


# ==================== IDENTITY ====================

def get_request_identity(
    x_user_id: Optional[str] = Header(default=None),
    user_id: Optional[str] = Query(default=None),
) -> Optional[str]:
    """Identity from the upstream auth header, else the user_id query param."""
    return (x_user_id or "").strip() or (user_id or "").strip() or None


def resolve_identity(request_identity: Optional[str], body_user_id: Optional[str] = None) -> str:
    """
    Pick the cart identity for a request.

    Order: auth header / query param, then the body field. Requests with
    no identity are rejected instead of sharing one anonymous cart.
    """
    identity = request_identity or (body_user_id or "").strip()
    if not identity:
        raise HTTPException(status_code=400, detail=ERROR_IDENTITY_REQUIRED)
    return identity


# ==================== SHUTDOWN HELPERS ====================

async def shutdown_services():
    """Close the catalog HTTP client. Carts stay in memory."""
    if _cart_store is not None:
        await _cart_store.catalog.aclose()
