"""Discogs user identity and profile tools."""
from __future__ import annotations

from typing import Any, Dict

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import body_params, parse_arguments, query_params, to_json, user_path
from discogs_gateway.tools.schemas import EditProfileParams, EmptyParams, UsernameParams, UserPagedParams
from discogs_gateway.utils.exceptions import ToolInputError


async def _handle_get_user_identity(args: Dict[str, Any], _: ToolContext) -> str:
    parse_arguments(EmptyParams, args)
    return to_json(await get_discogs_client().get("/oauth/identity"))


async def _handle_get_user_profile(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UsernameParams, args)
    client = get_discogs_client()
    return to_json(await client.get(await user_path(client, params.username)))


async def _handle_edit_user_profile(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(EditProfileParams, args)
    changes = body_params(params, "username")
    if not changes:
        raise ToolInputError("Provide at least one profile field to change")
    client = get_discogs_client()
    return to_json(await client.post(await user_path(client, params.username), json=changes))


async def _handle_get_user_submissions(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UserPagedParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    return to_json(await client.get(f"{path}/submissions", params=query_params(params, "username")))


async def _handle_get_user_contributions(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UserPagedParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    return to_json(await client.get(f"{path}/contributions", params=query_params(params, "username")))


TOOLS = [
    ToolDefinition(
        name="get_user_identity",
        description="Get the identity of the authenticated Discogs user.",
        parameters=EmptyParams,
        execute=_handle_get_user_identity,
    ),
    ToolDefinition(
        name="get_user_profile",
        description="Get a user's public profile.",
        parameters=UsernameParams,
        execute=_handle_get_user_profile,
    ),
    ToolDefinition(
        name="edit_user_profile",
        description="Edit the authenticated user's profile (name, location, home page, bio, currency).",
        parameters=EditProfileParams,
        execute=_handle_edit_user_profile,
    ),
    ToolDefinition(
        name="get_user_submissions",
        description="List the database edits a user has submitted.",
        parameters=UserPagedParams,
        execute=_handle_get_user_submissions,
    ),
    ToolDefinition(
        name="get_user_contributions",
        description="List the releases, labels and artists a user has contributed.",
        parameters=UserPagedParams,
        execute=_handle_get_user_contributions,
    ),
]
