"""Middleware converting unhandled failures into bounded JSON responses."""
import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Internal server error"
TOOL_PATH_PREFIX = "/api/tools/"


def failure_message(exc: BaseException) -> str:
    """Return the failure message, or a generic fallback when it has none."""
    try:
        message = str(exc)
    except Exception:
        message = ""
    return message or DEFAULT_ERROR_MESSAGE


def tool_name_from_request(request: Request) -> Optional[str]:
    """Name of the tool addressed by the request, if any."""
    name = request.path_params.get("name")
    if name:
        return name
    path = request.url.path
    if path.startswith(TOOL_PATH_PREFIX) and len(path) > len(TOOL_PATH_PREFIX):
        return path[len(TOOL_PATH_PREFIX):]
    return None


class ToolErrorMiddleware(BaseHTTPMiddleware):
    """Respond 500 with ``{error, tool}`` for any failure raised downstream.

    Installed inside the CORS layer so error responses carry CORS headers.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            tool_name = tool_name_from_request(request)
            message = failure_message(exc)
            logger.error(f"Tool {tool_name} failed: {message}", exc_info=exc)
            return JSONResponse(
                status_code=500,
                content={"error": message, "tool": tool_name},
            )
