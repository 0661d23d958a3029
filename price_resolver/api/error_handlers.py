"""Error Handlers — global exception handlers for the price API.

Invariants:
    - PriceServiceError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PriceServiceError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module about wiring only
    - Not-found and rejected queries logged at warning, everything else at error
    - Corrupt price rows (InvalidPriceError) logged with the offending field and row id
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from price_resolver.core.errors import (
    ErrorSeverity, InvalidPriceError, InvalidQueryError, PriceServiceError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:
    """Register price service domain/infrastructure error handler."""

    @app.exception_handler(PriceServiceError)
    async def service_error_handler(request: Request, exc: PriceServiceError):
        """Handle all price service domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.http_status < 500 else logging.ERROR
        )
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "product_id": exc.context.product_id,
            "brand_id": exc.context.brand_id,
        }
        if isinstance(exc, InvalidPriceError):
            # Invalid records only reach the API from storage
            row_id = (exc.context.debug_info or {}).get("row_id")
            logger.error(
                f"Corrupt price record (row {row_id}, field {exc.field}): "
                f"{exc.message}",
                extra={**extra, "price_id": row_id},
            )
        elif isinstance(exc, InvalidQueryError):
            logger.warning(
                f"Rejected price query on {exc.field}: {exc.message}", extra=extra,
            )
        else:
            logger.log(level, f"PriceServiceError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
