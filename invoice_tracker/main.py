"""
FastAPI application entry point for the invoice tracker backend.

create_app() builds the app, wires CORS, exception handlers and routers, and
attaches the record store handle to app.state. The module-level `app` is what
uvicorn serves; its Supabase store is connected at startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoice_tracker.config import Settings, settings
from invoice_tracker.db.client import get_supabase_client
from invoice_tracker.db.store import InvoiceStore, SupabaseInvoiceStore
from invoice_tracker.errors import NotFoundError, StoreError, ValidationError
from invoice_tracker.routes.health import router as health_router
from invoice_tracker.routes.invoices import router as invoices_router
from invoice_tracker.schemas.invoices import ErrorResponse

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def _get_cors_origins(app_settings: Settings) -> List[str]:
    """
    Get allowed CORS origins.

    Every origin is allowed unless CORS_ALLOWED_ORIGINS lists specific ones.
    """
    if app_settings.CORS_ALLOWED_ORIGINS:
        logger.info(
            f"CORS restricted to {len(app_settings.CORS_ALLOWED_ORIGINS)} allowed origins"
        )
        return app_settings.CORS_ALLOWED_ORIGINS

    logger.info(f"CORS configured for {app_settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Log detailed body validation errors, then answer 422."""
        logger.error(
            f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
        )
        logger.error(f"Request body preview: {str(await request.body())[:500]}")

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "validation_error",
                "message": "Request body is not valid",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(ValidationError)
    async def invoice_validation_handler(request: Request, exc: ValidationError):
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.error_code, exc.message)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, exc.error_code, exc.message)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(f"Store error on {request.method} {request.url.path}: {exc.message}")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, exc.error_code, exc.message
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error"
        )


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[InvoiceStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded settings)
        store: Record store handle. When omitted, a SupabaseInvoiceStore is
            connected during application startup.

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(application: FastAPI) -> AsyncIterator[None]:
        if getattr(application.state, "invoice_store", None) is None:
            client = get_supabase_client(app_settings)
            application.state.invoice_store = SupabaseInvoiceStore(client, table=app_settings.INVOICE_TABLE)
        yield

    app = FastAPI(
        title="Invoice Tracker API",
        description="Invoice records with expiry tracking",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.invoice_store = store

    _register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_get_cors_origins(app_settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(invoices_router)

    logger.info("FastAPI app initialized successfully")

    return app


app = create_app()
