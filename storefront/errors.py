"""
Common Error Constants

Centralized error messages shared by the cart store and the HTTP layer.
"""

# Cart input errors
ERROR_PRODUCT_ID_REQUIRED = "Product ID is required"
ERROR_QUANTITY_POSITIVE = "Quantity must be greater than 0"
ERROR_QUANTITY_REQUIRED = "Valid quantity is required"
ERROR_IDENTITY_REQUIRED = "Cart identity is required"

# Lookup errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_ITEM_NOT_FOUND = "Item not found in cart"

# Catalog errors
ERROR_CATALOG_UNAVAILABLE = "Product catalog unavailable"
ERROR_CATALOG_BAD_PAYLOAD = "Malformed product payload"

# Generic errors
ERROR_INVALID_REQUEST = "Invalid request"
ERROR_INTERNAL = "Internal server error"
