"""
Storefront Cart Service

Packages:
- cart: in-memory cart store, models and error kinds
- catalog: third-party product catalog client
- routers: FastAPI endpoints
- services: money helpers
"""

__version__ = "1.0.0"
