"""
Error types raised by the service layer and their HTTP mapping.

Services raise ``NotFoundError`` or ``InvalidArgumentError``; the
handlers registered by ``register_exception_handlers`` turn them into
JSON responses of the form ``{"error": "<message>"}``.  A request body
that cannot be parsed into its schema is answered with 400 and the
message ``Invalid request``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request"


class CoffeeShopError(Exception):
    """Base class for domain errors.  ``str(exc)`` is the client message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CoffeeShopError):
    """Unknown coffee or order identifier."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidArgumentError(CoffeeShopError):
    """Argument outside its allowed range, e.g. a non-positive quantity."""

    status_code = status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def coffee_shop_error_handler(request: Request, exc: CoffeeShopError) -> JSONResponse:
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and validation error handlers on ``app``."""
    app.add_exception_handler(CoffeeShopError, coffee_shop_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
