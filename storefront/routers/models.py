"""
Cart API Pydantic Models

Request bodies for the cart endpoints. Range checks (positive quantity,
non-empty product id) are done by the cart store so they surface as
400 responses with the store's message.
"""
from typing import Optional, Union
from pydantic import BaseModel


class AddToCartRequest(BaseModel):
    product_id: Optional[Union[str, int]] = None  # catalog ids are often numeric
    quantity: Optional[int] = 1
    size: Optional[str] = None
    color: Optional[str] = None
    user_id: Optional[str] = None


class UpdateCartItemRequest(BaseModel):
    quantity: Optional[int] = None
    user_id: Optional[str] = None
