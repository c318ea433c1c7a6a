import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from manga_catalog.domain.ports.services.logger import LoggerPort
from manga_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency of every request."""

    def __init__(self, app, logger: LoggerPort | None = None):
        super().__init__(app)
        self.logger = logger or StdLoggerAdapter("manga_catalog.access")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.exception(
                "%s %s %d %.1fms from %s", request.method, request.url.path, 500, duration_ms, client_ip
            )
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        self.logger.log(
            level, "%s %s %d %.1fms from %s", request.method, request.url.path, status, duration_ms, client_ip
        )
        return response
