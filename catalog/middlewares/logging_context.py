"""
Middleware for injecting contextual fields into structured logs.

This middleware adds request-specific information to the log context
that will be included in all log messages during request processing.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from catalog.logging import clear_log_context, logger, set_log_context
from catalog.settings import app_settings


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to inject contextual fields into structured logs.

    This middleware:
    - Adds endpoint and method to log context
    - Logs one access line per request with status code and duration
    - Clears log context after request completes
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        set_log_context(
            endpoint=request.url.path,
            method=request.method,
        )
        start = time.perf_counter()

        try:
            response = await call_next(request)

            set_log_context(status_code=response.status_code)
            if request.url.path not in app_settings.LOG_EXCLUDED_PATHS:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.info(
                    f"{request.method} {request.url.path} "
                    f"{response.status_code} ({duration_ms:.1f}ms)"
                )
            return response
        finally:
            clear_log_context()
