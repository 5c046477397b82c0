"""Discogs user list tools."""
from __future__ import annotations

from typing import Any, Dict

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import parse_arguments, query_params, to_json, user_path
from discogs_gateway.tools.schemas import ListParams, UserPagedParams


async def _handle_get_user_lists(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UserPagedParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    return to_json(await client.get(f"{path}/lists", params=query_params(params, "username")))


async def _handle_get_list(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ListParams, args)
    return to_json(await get_discogs_client().get(f"/lists/{params.list_id}"))


TOOLS = [
    ToolDefinition(
        name="get_user_lists",
        description="List the public lists a user has created.",
        parameters=UserPagedParams,
        execute=_handle_get_user_lists,
    ),
    ToolDefinition(
        name="get_list",
        description="Get the items of a user-curated list.",
        parameters=ListParams,
        execute=_handle_get_list,
    ),
]
