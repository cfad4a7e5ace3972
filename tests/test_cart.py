"""
Tests for cart models
"""

from decimal import Decimal

from storefront.cart import Cart, CartItem, CartSummary, EnrichedCartItem, ProductView


def _item(item_id="line-1", product_id="P1", price="10.00", quantity=1, size=None, color=None):
    return CartItem(
        id=item_id,
        product_id=product_id,
        name="Test",
        unit_price=Decimal(price),
        quantity=quantity,
        size=size,
        color=color,
    )


class TestCartItem:
    """Tests for CartItem dataclass."""

    def test_create_cart_item(self):
        """Test creating a cart item."""
        item = _item(quantity=2)

        assert item.product_id == "P1"
        assert item.quantity == 2
        assert item.added_at != ""

    def test_float_price_normalized_to_decimal(self):
        item = CartItem(id="x", product_id="P1", name="Test", unit_price=19.99, quantity=1)

        assert item.unit_price == Decimal("19.99")

    def test_subtotal_calculation(self):
        """Test subtotal is price times quantity."""
        item = _item(price="49.99", quantity=3)

        assert item.subtotal == Decimal("149.97")

    def test_subtotal_follows_quantity(self):
        item = _item(price="2.50", quantity=1)
        item.quantity = 4

        assert item.subtotal == Decimal("10.00")

    def test_variant_is_part_of_identity(self):
        item = _item(size="10", color=None)

        assert item.matches("P1", "10", None)
        assert not item.matches("P1", "11", None)
        assert not item.matches("P1", "10", "red")
        assert not item.matches("P2", "10", None)

    def test_to_dict(self):
        """Test serialization to dict."""
        data = _item(price="5.50", quantity=2, size="M").to_dict()

        assert data["product_id"] == "P1"
        assert data["price"] == 5.5
        assert data["subtotal"] == 11.0
        assert data["size"] == "M"
        assert "added_at" in data


class TestCart:
    """Tests for Cart dataclass."""

    def test_create_empty_cart(self):
        """Test creating an empty cart."""
        cart = Cart(identity="user-1")

        assert cart.identity == "user-1"
        assert cart.items == []
        assert cart.item_count == 0
        assert cart.total == Decimal("0")
        assert cart.created_at == cart.updated_at

    def test_cart_with_items(self):
        """Test aggregates over multiple lines."""
        cart = Cart(
            identity="user-1",
            items=[
                _item("a", "P1", "100.00", 2),
                _item("b", "P2", "200.00", 1),
            ],
        )

        assert cart.item_count == 3
        assert cart.total == Decimal("400.00")

    def test_find_item_and_line(self):
        cart = Cart(identity="u", items=[_item("a", "P1", size="10"), _item("b", "P1", size="11")])

        assert cart.find_item("b").size == "11"
        assert cart.find_item("missing") is None
        assert cart.find_line("P1", "10", None).id == "a"
        assert cart.find_line("P1", None, None) is None

    def test_summary(self):
        cart = Cart(identity="u", items=[_item("a", quantity=2), _item("b", "P2", "1.25", 4)])

        summary = cart.summary()

        assert summary == CartSummary(item_count=6, total=Decimal("25.00"), distinct_line_count=2)
        assert summary.to_dict() == {"item_count": 6, "total": 25.0, "distinct_line_count": 2}

    def test_cart_serialization(self):
        cart = Cart(identity="user-1", items=[_item(quantity=2)])

        data = cart.to_dict()

        assert data["id"] == "user-1"
        assert data["total"] == 20.0
        assert data["item_count"] == 2
        assert len(data["items"]) == 1


class TestEnrichedCartItem:

    def test_product_attached_when_present(self):
        view = ProductView(
            id="P1", name="Live name", brand="B", price=Decimal("12.00"),
            image=None, thumbnail=None, in_stock=True, stock=3,
        )

        data = EnrichedCartItem(item=_item(), product=view).to_dict()

        assert data["product"]["name"] == "Live name"
        assert data["product"]["price"] == 12.0
        # Snapshot price is kept next to the live price
        assert data["price"] == 10.0

    def test_no_product_key_when_unenriched(self):
        data = EnrichedCartItem(item=_item()).to_dict()

        assert "product" not in data
