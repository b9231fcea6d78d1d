"""Catalog service main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_service.api.catalog import router as catalog_router
from catalog_service.api.categories import router as categories_router
from catalog_service.api.health import router as health_router
from catalog_service.api.middleware import REQUEST_ID_HEADER, setup_middleware
from catalog_service.domain.exceptions import (
    CategoryCodeExistsError,
    DomainError,
    InternalQueryError,
    InvalidCategoryError,
    InvalidPaginationError,
    InvalidPriceFilterError,
    InvalidProductCodeError,
    ProductNotFoundError,
)
from catalog_service.infrastructure.config import settings
from catalog_service.infrastructure.database import dispose_engine
from catalog_service.infrastructure.logging import configure_logging

configure_logging(settings.log_level, settings.json_logs)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    logger.info(
        "Starting catalog service",
        version=settings.api_version,
        debug=settings.debug,
    )

    yield

    # Shutdown
    logger.info("Shutting down catalog service")
    await dispose_engine()


app = FastAPI(
    title="Catalog Service",
    description="Product catalog listing and detail API",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request ID correlation and access logging
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(catalog_router)
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


# Domain error -> (HTTP status, error code). Most specific class first.
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int, str]] = [
    (InvalidPaginationError, status.HTTP_400_BAD_REQUEST, "INVALID_PAGINATION"),
    (InvalidPriceFilterError, status.HTTP_400_BAD_REQUEST, "INVALID_PRICE_FILTER"),
    (InvalidProductCodeError, status.HTTP_400_BAD_REQUEST, "INVALID_PRODUCT_CODE"),
    (ProductNotFoundError, status.HTTP_404_NOT_FOUND, "PRODUCT_NOT_FOUND"),
    (InternalQueryError, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_QUERY_ERROR"),
    (InvalidCategoryError, status.HTTP_400_BAD_REQUEST, "INVALID_CATEGORY"),
    (CategoryCodeExistsError, status.HTTP_409_CONFLICT, "CATEGORY_CODE_EXISTS"),
]


def error_status_for(exc: DomainError) -> tuple[int, str]:
    """Look up HTTP status and error code for a domain error."""
    for error_type, status_code, error_code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code, error_code
    return status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR"


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: dict | list | None = None,
) -> JSONResponse:
    """Build the standard error body."""
    request_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details if details is not None else [],
            "request_id": request_id,
        },
        headers={REQUEST_ID_HEADER: request_id} if request_id else None,
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to HTTP responses."""
    status_code, error_code = error_status_for(exc)

    if status_code >= 500:
        # Store details stay in the logs.
        logger.error("Catalog query failed", error=exc.message, details=exc.details)
        return error_response(request, status_code, error_code, "Internal server error", {})

    logger.warning("Request rejected", error_code=error_code, error=exc.message)
    return error_response(request, status_code, error_code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 responses."""
    details = [
        {
            "field": ".".join(str(p) for p in err.get("loc", ())),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Invalid request", details
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the standard format."""
    try:
        error_code = HTTPStatus(exc.status_code).name
    except ValueError:
        error_code = "ERROR"
    return error_response(request, exc.status_code, error_code, str(exc.detail))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception("Unhandled exception in handler", error=str(exc))

    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
    )
