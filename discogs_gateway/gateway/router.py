"""FastAPI router exposing tool discovery and execution endpoints."""
from __future__ import annotations

import inspect
import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from discogs_gateway.config import Settings
from discogs_gateway.gateway.introspection import describe_tool, normalize_result
from discogs_gateway.gateway.models import HealthResponse, InvokeResponse, ToolContext, ToolsResponse
from discogs_gateway.gateway.tool_registry import ToolDefinition, ToolRegistry
from discogs_gateway.utils.exceptions import ToolInputError
from discogs_gateway.version import VERSION

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tools"])

USAGE_EXAMPLE = {
    "endpoint": "POST /api/tools/:toolName",
    "example": {
        "url": "/api/tools/search",
        "body": {"q": "Pink Floyd", "type": "artist"},
    },
}


def get_registry(request: Request) -> ToolRegistry:
    """Return the registry built for the running application."""
    return request.app.state.registry


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


async def _read_arguments(request: Request) -> Any:
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ToolInputError("Request body must be valid JSON") from exc


async def _execute(definition: ToolDefinition, arguments: Any, context: ToolContext) -> Any:
    if inspect.iscoroutinefunction(definition.execute):
        return await definition.execute(arguments, context)
    # plain callables run off the event loop
    result = await run_in_threadpool(definition.execute, arguments, context)
    if inspect.isawaitable(result):
        result = await result
    return result


@router.get("/health", response_model=HealthResponse)
async def health_check(
    registry: ToolRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
):
    """Liveness check."""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": VERSION,
        "toolsCount": len(registry),
    }


@router.get("/api/tools", response_model=ToolsResponse)
async def list_registered_tools(
    registry: ToolRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
):
    """Return every tool definition so callers can introspect capabilities."""
    return {
        "service": settings.app_name,
        "version": VERSION,
        "description": settings.service_description,
        "toolsCount": len(registry),
        "tools": [describe_tool(definition) for definition in registry.list_tools()],
        "usage": USAGE_EXAMPLE,
    }


@router.post("/api/tools/{name}", response_model=InvokeResponse)
async def invoke_tool(
    name: str,
    request: Request,
    registry: ToolRegistry = Depends(get_registry),
):
    """Execute a registered tool with the JSON request body as its arguments.

    Failures raised by the tool are turned into 500 responses by ToolErrorMiddleware.
    """
    definition = registry.get(name)
    if definition is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": f"Tool '{name}' not found", "available": registry.names()},
        )

    arguments = await _read_arguments(request)
    logger.info("Executing tool: %s %s", name, arguments)

    result = await _execute(definition, arguments, ToolContext())

    return {"success": True, "tool": name, "result": normalize_result(result)}
