"""Catalog product model."""
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import parse_price


class Product(BaseModel):
    """Product as returned by the third-party catalog."""
    id: str
    name: str
    brand: Optional[str] = None
    price: Decimal
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    in_stock: bool = False
    stock: int = 0

    model_config = ConfigDict(extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def convert_id_to_str(cls, v):
        # The catalog API uses integer ids; carts key on strings
        return str(v) if v is not None else v

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return parse_price(v)

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Product":
        """
        Build a Product from a raw catalog payload.

        The catalog names the product ``title`` and ships a list of
        ``images``; the first image (or the thumbnail) is used as the
        display image. Raises ValueError (pydantic.ValidationError is one)
        on missing fields.
        """
        if payload.get("price") is None:
            raise ValueError("product payload has no price")
        images = payload.get("images") or []
        thumbnail = payload.get("thumbnail")
        stock = int(payload.get("stock") or 0)
        return cls(
            id=payload.get("id"),
            name=payload.get("title") or payload.get("name"),
            brand=payload.get("brand"),
            price=payload.get("price"),
            image=payload.get("image") or (images[0] if images else thumbnail),
            thumbnail=thumbnail,
            in_stock=stock > 0,
            stock=stock,
        )
