"""Correlation ID middleware for request tracing"""
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from prediction_diary.shared.logging import get_logger

logger = get_logger(__name__)


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Tag every request with a correlation ID.

    - Accepts X-Correlation-ID header from clients, generates one otherwise
    - Adds correlation ID to response headers
    - Logs method, path, status and duration under that ID
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Correlation-ID"] = correlation_id
        logger.info(
            "[%s] %s %s -> %d (%.1f ms)",
            correlation_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

