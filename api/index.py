"""
Storefront Cart API - Main FastAPI Application

Single entry point for the cart API routes.
"""
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront import __version__
from storefront.errors import ERROR_INVALID_REQUEST
from storefront.logging import get_logger
from storefront.routers import cart_router
from storefront.routers.deps import shutdown_services

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    logger.info("Storefront cart API starting (version %s)", __version__)
    yield
    # Shutdown
    await shutdown_services()


app = FastAPI(
    title="Storefront Cart API",
    description="Shopping cart backed by a third-party product catalog",
    version=__version__,
    lifespan=lifespan
)

_cors_origins = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cart_router)


# ==================== ERROR ENVELOPE ====================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {success: false, message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies (wrong types, bad JSON)."""
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": ERROR_INVALID_REQUEST, "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "storefront-cart",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
