"""Discogs user wantlist tools."""
from __future__ import annotations

from typing import Any, Dict

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import body_params, parse_arguments, query_params, to_json, user_path
from discogs_gateway.tools.schemas import EditWantParams, UserPagedParams, WantParams


async def _handle_get_user_wantlist(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UserPagedParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    return to_json(await client.get(f"{path}/wants", params=query_params(params, "username")))


async def _handle_add_to_wantlist(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(EditWantParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    payload = await client.put(
        f"{path}/wants/{params.release_id}",
        json=body_params(params, "username", "release_id") or None,
    )
    return to_json(payload)


async def _handle_edit_item_in_wantlist(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(EditWantParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    payload = await client.post(
        f"{path}/wants/{params.release_id}",
        json=body_params(params, "username", "release_id"),
    )
    return to_json(payload)


async def _handle_delete_item_in_wantlist(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(WantParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    await client.delete(f"{path}/wants/{params.release_id}")
    return to_json({"deleted": True, "release_id": params.release_id})


TOOLS = [
    ToolDefinition(
        name="get_user_wantlist",
        description="List the releases in a user's wantlist.",
        parameters=UserPagedParams,
        execute=_handle_get_user_wantlist,
    ),
    ToolDefinition(
        name="add_to_wantlist",
        description="Add a release to a user's wantlist.",
        parameters=EditWantParams,
        execute=_handle_add_to_wantlist,
    ),
    ToolDefinition(
        name="edit_item_in_wantlist",
        description="Change the notes or rating of a wantlist item.",
        parameters=EditWantParams,
        execute=_handle_edit_item_in_wantlist,
    ),
    ToolDefinition(
        name="delete_item_in_wantlist",
        description="Remove a release from a user's wantlist.",
        parameters=WantParams,
        execute=_handle_delete_item_in_wantlist,
    ),
]
