"""Discogs inventory export tools."""
from __future__ import annotations

from typing import Any, Dict

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import parse_arguments, query_params, to_json
from discogs_gateway.tools.schemas import EmptyParams, InventoryExportParams, PaginationParams


async def _handle_inventory_export(args: Dict[str, Any], _: ToolContext) -> str:
    parse_arguments(EmptyParams, args)
    payload = await get_discogs_client().post("/inventory/export")
    return to_json(payload or {"requested": True})


async def _handle_get_inventory_exports(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(PaginationParams, args)
    return to_json(await get_discogs_client().get("/inventory/export", params=query_params(params)))


async def _handle_get_inventory_export(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(InventoryExportParams, args)
    return to_json(await get_discogs_client().get(f"/inventory/export/{params.export_id}"))


async def _handle_download_inventory_export(args: Dict[str, Any], _: ToolContext) -> str:
    """Return the export as raw CSV text."""
    params = parse_arguments(InventoryExportParams, args)
    return await get_discogs_client().get_text(f"/inventory/export/{params.export_id}/download")


TOOLS = [
    ToolDefinition(
        name="inventory_export",
        description="Request a CSV export of the authenticated seller's inventory.",
        parameters=EmptyParams,
        execute=_handle_inventory_export,
    ),
    ToolDefinition(
        name="get_inventory_exports",
        description="List recent inventory exports and their status.",
        parameters=PaginationParams,
        execute=_handle_get_inventory_exports,
    ),
    ToolDefinition(
        name="get_inventory_export",
        description="Get the status of one inventory export.",
        parameters=InventoryExportParams,
        execute=_handle_get_inventory_export,
    ),
    ToolDefinition(
        name="download_inventory_export",
        description="Download a finished inventory export as CSV text.",
        parameters=InventoryExportParams,
        execute=_handle_download_inventory_export,
    ),
]
