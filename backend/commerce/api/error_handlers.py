"""Error Handlers - global exception handlers for the commerce API.

Invariants:
    - CommerceError -> {"error", "code"} with the error's own http_status
    - RequestValidationError (body not a JSON object, missing body) -> 400, same envelope
      as PayloadValidationError
    - Any 500 response carries a fixed message; the underlying exception is logged with traceback

Design Decisions:
    - Three-layer handler: domain (CommerceError), validation (Pydantic), catch-all (Exception)
    - One masking policy for every 500: internals are logged server-side, never returned
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from commerce.core.errors import CommerceError, PayloadValidationError
from commerce.core.validation import describe_violations

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_commerce_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_commerce_error_handler(app: FastAPI) -> None:
    """Register commerce domain/infrastructure error handler."""

    @app.exception_handler(CommerceError)
    async def commerce_error_handler(request: Request, exc: CommerceError):
        """Handle all commerce domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(f"CommerceError: {exc.message}", extra=extra, exc_info=exc)
            return JSONResponse(
                status_code=exc.http_status,
                content={"error": INTERNAL_ERROR_MESSAGE, "code": exc.code},
            )
        logger.warning(f"CommerceError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request-parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle FastAPI request validation errors with the payload error envelope."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = PayloadValidationError(describe_violations(list(exc.errors())))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        )
