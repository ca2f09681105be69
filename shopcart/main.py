# shopcart/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shopcart.core.config import Settings, get_settings
from shopcart.core.errors import (
    EmptyCartError,
    NotAuthenticatedError,
    ProductNotFoundError,
    StorageError,
)
from shopcart.database import Database
from shopcart.facade import ShopFacade

# Routers
from shopcart.routers.auth import router as auth_router
from shopcart.routers.products import router as products_router
from shopcart.routers.cart import router as cart_router
from shopcart.routers.addresses import router as addresses_router
from shopcart.routers.checkout import router as checkout_router

logger = logging.getLogger("uvicorn")


# --- Error handlers: fixed messages, never raw exception text ---

def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "The store is unavailable, please try again later"},
    )


def _product_not_found_handler(request: Request, exc: ProductNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Product not found"},
    )


def _empty_cart_handler(request: Request, exc: EmptyCartError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Cart is empty"},
    )


def _not_authenticated_handler(request: Request, exc: NotAuthenticatedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": "Authentication required"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Composition root: builds the store and the facade and wires the routers.
    """
    settings = settings or get_settings()

    db = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    facade = ShopFacade(db, principal_id=settings.PRINCIPAL_USER_ID)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Startup:
          - Verify DB connectivity and create tables.

        Shutdown:
          - Dispose of the engine's connection pool.
        """
        logger.info("🔄 Startup: Opening store at %s", settings.DATABASE_URL)
        try:
            db.create_db_and_tables()
            logger.info("✅ Startup: store OK, tables verified.")
        except StorageError as e:
            logger.error(f"❌ Startup: store FAILED: {e}")
            raise
        yield
        db.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME or "Shopcart API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.facade = facade

    # --- CORS configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(ProductNotFoundError, _product_not_found_handler)
    app.add_exception_handler(EmptyCartError, _empty_cart_handler)
    app.add_exception_handler(NotAuthenticatedError, _not_authenticated_handler)

    # Versioned API prefix, e.g. /api/v1
    app.include_router(products_router, prefix=settings.API_V1_STR)
    app.include_router(cart_router, prefix=settings.API_V1_STR)
    app.include_router(auth_router, prefix=settings.API_V1_STR)
    app.include_router(addresses_router, prefix=settings.API_V1_STR)
    app.include_router(checkout_router, prefix=settings.API_V1_STR)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "shopcart"}

    return app


logging.basicConfig(level=get_settings().LOG_LEVEL.upper())

app = create_app()
