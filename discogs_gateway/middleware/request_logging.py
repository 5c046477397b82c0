"""Middleware for logging API requests."""
import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


def get_client_ip(request: Request) -> Optional[str]:
    """Resolve the originating client IP, honouring proxy headers."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # X-Forwarded-For can contain multiple IPs; the first is the original client
        return forwarded_for.split(",")[0].strip()
    if request.headers.get("X-Real-IP"):
        return request.headers.get("X-Real-IP").strip()
    if request.client:
        return request.client.host
    return None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log every API request with its outcome and duration."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "%s %s -> failed (%.1f ms): %r",
                request.method,
                request.url.path,
                (time.perf_counter() - started) * 1000,
                exc,
            )
            raise

        try:
            duration_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1f ms) client=%s",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                get_client_ip(request),
            )
        except Exception as e:
            # Don't break the app if logging fails
            logger.error(f"Failed to log API request: {e}")

        return response
