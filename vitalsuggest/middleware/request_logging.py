"""
Request logging middleware.
Logs one JSON line per request and per response.

Request bodies carry patient vital signs, so only a summary of them is
logged: which fields were sent and the requested language.
"""
import json
import logging
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Body fields whose values may be logged as-is
PLAIN_FIELDS = {"language"}


def summarize_body(body_bytes: bytes) -> Optional[Dict[str, Any]]:
    """
    Describe a JSON request body without exposing reading values.

    Returns None for an empty body, a marker for bodies that are not JSON
    objects, and otherwise the sorted field names plus any plain fields.
    """
    if not body_bytes:
        return None

    try:
        body_data = json.loads(body_bytes.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return {"malformed": True}

    if not isinstance(body_data, dict):
        return {"json_type": type(body_data).__name__}

    summary: Dict[str, Any] = {"fields": sorted(body_data)}
    for field in PLAIN_FIELDS:
        value = body_data.get(field)
        if isinstance(value, str):
            summary[field] = value
    return summary


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    def __init__(self, app, ignore_paths: tuple = ()):
        super().__init__(app)
        self.ignore_paths = ignore_paths or (
            "/health",
            "/docs",
            "/openapi.json",
            "/redoc",
            "/favicon.ico",
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.ignore_paths:
            return await call_next(request)

        start_time = time.time()

        request_log = {
            "type": "request",
            "method": request.method,
            "path": request.url.path,
            "client_ip": self._get_client_ip(request),
        }
        if request.method == "POST":
            body = summarize_body(await request.body())
            if body:
                request_log["body"] = body

        logger.info(json.dumps(request_log))

        response = await call_next(request)

        process_time = time.time() - start_time

        response_log = {
            "type": "response",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time_ms": round(process_time * 1000, 2),
        }

        if response.status_code >= 500:
            logger.error(json.dumps(response_log))
        elif response.status_code >= 400:
            logger.warning(json.dumps(response_log))
        else:
            logger.info(json.dumps(response_log))

        response.headers["X-Process-Time"] = str(process_time)

        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        # Behind a proxy
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"
