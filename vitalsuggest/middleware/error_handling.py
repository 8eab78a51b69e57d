"""
Error handling middleware.
Centralizes error handling and response formatting.
"""
import logging
import traceback
from typing import Callable

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


async def malformed_request_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject request bodies that do not decode into the expected shape."""
    errors = jsonable_encoder(exc.errors())
    # Locations only: the offending inputs are patient readings
    logger.warning(
        "Malformed request",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_locations": [error.get("loc") for error in errors],
        },
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Malformed Request",
            "message": "Invalid request payload",
            "details": errors,
        },
    )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Turns exceptions that escape a handler into a 500 ErrorResponse.

    The request body is never logged here since it carries patient readings.
    """

    def __init__(self, app, expose_details: bool = False):
        super().__init__(app)
        self.expose_details = expose_details

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )

            response_content = {
                "error": "Internal Server Error",
                "message": "An internal error occurred. Please try again later.",
            }
            if self.expose_details:
                response_content["message"] = f"{type(e).__name__}: {str(e)}"
                response_content["details"] = {"traceback": traceback.format_exc()}

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=response_content,
            )
