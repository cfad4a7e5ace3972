"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, List

from storefront.services.money import to_decimal, multiply, to_float


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class CartItem:
    """Single line in the cart: one product/variant combination."""
    id: str
    product_id: str
    name: str
    unit_price: Decimal  # Snapshot taken when the line was created
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    image: Optional[str] = None
    added_at: str = ""

    def __post_init__(self):
        if not self.added_at:
            self.added_at = _utcnow()
        self.unit_price = to_decimal(self.unit_price)

    @property
    def subtotal(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.unit_price, self.quantity)

    def matches(self, product_id: str, size: Optional[str], color: Optional[str]) -> bool:
        """True if this line is the given product/variant."""
        return self.product_id == product_id and self.size == size and self.color == color

    def to_dict(self) -> dict:
        """Convert to JSON-ready dictionary."""
        return {
            "id": self.id,
            "product_id": self.product_id,
            "name": self.name,
            "price": to_float(self.unit_price),
            "image": self.image,
            "quantity": self.quantity,
            "size": self.size,
            "color": self.color,
            "subtotal": to_float(self.subtotal),
            "added_at": self.added_at,
        }


@dataclass
class Cart:
    """Shopping cart owned by one identity."""
    identity: str
    items: List[CartItem] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    def __post_init__(self):
        now = _utcnow()
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = now

    @property
    def total(self) -> Decimal:
        """Sum of all line subtotals."""
        return sum((item.subtotal for item in self.items), Decimal("0"))

    @property
    def item_count(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    def find_item(self, item_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == item_id), None)

    def find_line(self, product_id: str, size: Optional[str], color: Optional[str]) -> Optional[CartItem]:
        return next((item for item in self.items if item.matches(product_id, size, color)), None)

    def touch(self) -> None:
        self.updated_at = _utcnow()

    def summary(self) -> "CartSummary":
        return CartSummary(
            item_count=self.item_count,
            total=self.total,
            distinct_line_count=len(self.items),
        )

    def to_dict(self) -> dict:
        """Convert to JSON-ready dictionary."""
        return {
            "id": self.identity,
            "items": [item.to_dict() for item in self.items],
            "total": to_float(self.total),
            "item_count": self.item_count,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class CartSummary:
    """Aggregate-only projection of a cart."""
    item_count: int
    total: Decimal
    distinct_line_count: int

    def to_dict(self) -> dict:
        return {
            "item_count": self.item_count,
            "total": to_float(self.total),
            "distinct_line_count": self.distinct_line_count,
        }


@dataclass
class ProductView:
    """Live catalog data attached to a line for display."""
    id: str
    name: str
    brand: Optional[str]
    price: Decimal
    image: Optional[str]
    thumbnail: Optional[str]
    in_stock: bool
    stock: int

    @classmethod
    def from_product(cls, product) -> "ProductView":
        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            price=to_decimal(product.price),
            image=product.image,
            thumbnail=product.thumbnail,
            in_stock=product.in_stock,
            stock=product.stock,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "price": to_float(self.price),
            "image": self.image,
            "thumbnail": self.thumbnail,
            "in_stock": self.in_stock,
            "stock": self.stock,
        }


@dataclass
class EnrichedCartItem:
    """Cart line plus live product data (None if the lookup failed)."""
    item: CartItem
    product: Optional[ProductView] = None

    def to_dict(self) -> dict:
        data = self.item.to_dict()
        if self.product is not None:
            data["product"] = self.product.to_dict()
        return data


@dataclass
class EnrichedCart:
    """Read-only cart view for display.

    Aggregates come from the stored snapshot prices, not from the live
    catalog prices attached to each line.
    """
    identity: str
    items: List[EnrichedCartItem]
    total: Decimal
    item_count: int
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.identity,
            "items": [item.to_dict() for item in self.items],
            "total": to_float(self.total),
            "item_count": self.item_count,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
