"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Iterable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging.

    Paths in ``quiet_paths`` (health checks by default) are logged at debug
    so they do not drown out preview traffic.
    """

    def __init__(
        self,
        app,
        logger: logging.Logger = None,
        quiet_paths: Iterable[str] = ("/api/health",),
    ):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("smart_routing.web")
        self.quiet_paths = frozenset(quiet_paths)

    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        start_time = time.time()
        path = request.url.path
        level = logging.DEBUG if path in self.quiet_paths else logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        self.logger.log(level, f"Request: {request.method} {path} from {client_ip}")

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        self.logger.log(
            level,
            f"Response: {request.method} {path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )

        return response
