"""
Unitip Backend — Request Logging Middleware
=============================================

What:  One access line per request on the `unitip.access` logger.
How:   Times the downstream app and logs `<METHOD> <path> -> <status>` with
       the duration and request ID attached as `extra` fields. A request
       that raises is logged as 500 before the exception continues to the
       server error handler.

Never logged: request bodies, query strings, the Authorization header.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from unitip.middleware.request_id import request_id_var

logger = logging.getLogger("unitip.access")

QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.log(
                level_for_status(status),
                "%s %s -> %d (%.1fms)",
                request.method,
                request.url.path,
                status,
                elapsed_ms,
                extra={
                    "request_id": request_id_var.get(""),
                    "status": status,
                    "duration_ms": elapsed_ms,
                },
            )
