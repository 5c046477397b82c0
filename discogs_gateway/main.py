"""Discogs tool gateway FastAPI application."""
import logging
from typing import Dict, Iterable, Optional, Sequence

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from discogs_gateway.config import Settings, get_settings
from discogs_gateway.gateway.router import router as tools_router
from discogs_gateway.gateway.tool_registry import ToolDefinition, ToolRegistry
from discogs_gateway.middleware.error_handling import ToolErrorMiddleware
from discogs_gateway.middleware.request_logging import RequestLoggingMiddleware
from discogs_gateway.tools import TOOL_CATEGORIES
from discogs_gateway.version import VERSION

# Configure logging
logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)


def log_startup_banner(
    registry: ToolRegistry,
    settings: Settings,
    categories: Dict[str, Sequence[ToolDefinition]],
) -> None:
    """Log the listening address, endpoints and tools grouped by category."""
    base_url = f"http://{settings.server_host}:{settings.server_port}"
    logger.info("=============================================")
    logger.info(f"Discogs MCP REST API Server v{VERSION}")
    logger.info("=============================================")
    logger.info(f"Listening on {base_url}")
    logger.info(f"Health check: GET {base_url}/health")
    logger.info(f"Tools endpoint: GET {base_url}/api/tools")
    logger.info(f"Execute tool: POST {base_url}/api/tools/:name")
    logger.info("---------------------------------------------")
    logger.info(f"Available Tools ({len(registry)}):")
    for category, tools in categories.items():
        registered = [tool for tool in tools if registry.get(tool.name) is tool]
        logger.info(f"  [{category}] ({len(registered)})")
        for tool in registered:
            logger.info(f"    - {tool.name}: {tool.description}")
    logger.info("=============================================")


def create_app(
    tools: Optional[Iterable[ToolDefinition]] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the gateway application around a fixed set of tools.

    Raises:
        DuplicateToolError: if two tools share a name
    """
    settings = settings or get_settings()
    if tools is None:
        categories = TOOL_CATEGORIES
    else:
        categories = {"Tools": list(tools)}
    registry = ToolRegistry(tool for group in categories.values() for tool in group)

    app = FastAPI(
        title=settings.app_name,
        description=settings.service_description,
        version=VERSION,
    )
    app.state.registry = registry
    app.state.settings = settings

    # Innermost: failures become 500 responses before logging and CORS see them
    app.add_middleware(ToolErrorMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(tools_router)

    @app.on_event("startup")
    async def startup_event():
        log_startup_banner(registry, settings, categories)

    return app


app = create_app()


def run() -> None:
    """Serve the gateway with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
