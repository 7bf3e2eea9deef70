"""
Logfire Middleware for FastAPI.

This middleware times every request of the Pink Nail API and reports it
through the monitoring helpers, including:
- Request/response logging
- Performance metrics (``X-Process-Time`` header)
- Slow request warnings
- Error tracking
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from pinknail.core.logging_config import get_logger
from pinknail.core.monitoring import log_api_request, log_error

logger = get_logger(__name__)

SLOW_REQUEST_THRESHOLD_MS = 1000.0


class LogfireMiddleware(BaseHTTPMiddleware):
    """Middleware for timing and reporting API requests."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request and log metrics.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/handler

        Returns:
            The HTTP response
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        request.state.start_time = start_time

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={"method": method, "path": path, "duration_ms": duration_ms},
            )
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            log_error(type(e).__name__, str(e), {"method": method, "path": path})
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=duration_ms)
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        if duration_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "status_code": response.status_code,
                },
            )

        return response
