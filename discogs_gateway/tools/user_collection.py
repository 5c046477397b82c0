"""Discogs user collection tools: folders, instances, custom fields and value."""
from __future__ import annotations

from typing import Any, Dict

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import parse_arguments, query_params, to_json, user_path
from discogs_gateway.tools.schemas import (
    AddToFolderParams,
    CollectionInstanceParams,
    CollectionItemsParams,
    CreateFolderParams,
    CustomFieldValueParams,
    EditFolderParams,
    FindReleaseInCollectionParams,
    FolderParams,
    MoveInstanceParams,
    RateInstanceParams,
    UsernameParams,
)
from discogs_gateway.utils.exceptions import ToolInputError


async def _collection_path(client, username) -> str:
    return f"{await user_path(client, username)}/collection"


def _instance_path(base: str, params: CollectionInstanceParams) -> str:
    return f"{base}/folders/{params.folder_id}/releases/{params.release_id}/instances/{params.instance_id}"


async def _handle_get_user_collection_folders(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UsernameParams, args)
    client = get_discogs_client()
    return to_json(await client.get(f"{await _collection_path(client, params.username)}/folders"))


async def _handle_create_user_collection_folder(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(CreateFolderParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    return to_json(await client.post(f"{base}/folders", json={"name": params.name}))


async def _handle_get_user_collection_folder(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(FolderParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    return to_json(await client.get(f"{base}/folders/{params.folder_id}"))


async def _handle_edit_user_collection_folder(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(EditFolderParams, args)
    if params.folder_id in (0, 1):
        raise ToolInputError("Folders 0 (All) and 1 (Uncategorized) cannot be renamed")
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    return to_json(await client.post(f"{base}/folders/{params.folder_id}", json={"name": params.name}))


async def _handle_delete_user_collection_folder(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(FolderParams, args)
    if params.folder_id in (0, 1):
        raise ToolInputError("Folders 0 (All) and 1 (Uncategorized) cannot be deleted")
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    await client.delete(f"{base}/folders/{params.folder_id}")
    return to_json({"deleted": True, "folder_id": params.folder_id})


async def _handle_find_release_in_user_collection(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(FindReleaseInCollectionParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    payload = await client.get(
        f"{base}/releases/{params.release_id}",
        params=query_params(params, "username", "release_id"),
    )
    return to_json(payload)


async def _handle_get_user_collection_items(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(CollectionItemsParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    payload = await client.get(
        f"{base}/folders/{params.folder_id}/releases",
        params=query_params(params, "username", "folder_id"),
    )
    return to_json(payload)


async def _handle_add_release_to_user_collection_folder(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(AddToFolderParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    return to_json(await client.post(f"{base}/folders/{params.folder_id}/releases/{params.release_id}"))


async def _handle_rate_release_in_user_collection(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(RateInstanceParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    await client.post(_instance_path(base, params), json={"rating": params.rating})
    return to_json({"updated": True, "instance_id": params.instance_id, "rating": params.rating})


async def _handle_move_release_in_user_collection(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(MoveInstanceParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    await client.post(_instance_path(base, params), json={"folder_id": params.destination_folder_id})
    return to_json({"moved": True, "instance_id": params.instance_id, "folder_id": params.destination_folder_id})


async def _handle_delete_release_from_user_collection_folder(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(CollectionInstanceParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    await client.delete(_instance_path(base, params))
    return to_json({"deleted": True, "instance_id": params.instance_id})


async def _handle_get_user_collection_custom_fields(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UsernameParams, args)
    client = get_discogs_client()
    return to_json(await client.get(f"{await _collection_path(client, params.username)}/fields"))


async def _handle_edit_user_collection_custom_field_value(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(CustomFieldValueParams, args)
    client = get_discogs_client()
    base = await _collection_path(client, params.username)
    await client.post(f"{_instance_path(base, params)}/fields/{params.field_id}", json={"value": params.value})
    return to_json({"updated": True, "instance_id": params.instance_id, "field_id": params.field_id})


async def _handle_get_user_collection_value(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UsernameParams, args)
    client = get_discogs_client()
    return to_json(await client.get(f"{await _collection_path(client, params.username)}/value"))


TOOLS = [
    ToolDefinition(
        name="get_user_collection_folders",
        description="List the folders of a user's collection.",
        parameters=UsernameParams,
        execute=_handle_get_user_collection_folders,
    ),
    ToolDefinition(
        name="create_user_collection_folder",
        description="Create a new folder in a user's collection.",
        parameters=CreateFolderParams,
        execute=_handle_create_user_collection_folder,
    ),
    ToolDefinition(
        name="get_user_collection_folder",
        description="Get the metadata of one collection folder.",
        parameters=FolderParams,
        execute=_handle_get_user_collection_folder,
    ),
    ToolDefinition(
        name="edit_user_collection_folder",
        description="Rename a collection folder.",
        parameters=EditFolderParams,
        execute=_handle_edit_user_collection_folder,
    ),
    ToolDefinition(
        name="delete_user_collection_folder",
        description="Delete an empty collection folder.",
        parameters=FolderParams,
        execute=_handle_delete_user_collection_folder,
    ),
    ToolDefinition(
        name="find_release_in_user_collection",
        description="Find every instance of a release in a user's collection.",
        parameters=FindReleaseInCollectionParams,
        execute=_handle_find_release_in_user_collection,
    ),
    ToolDefinition(
        name="get_user_collection_items",
        description="List the releases in a collection folder (folder 0 holds everything).",
        parameters=CollectionItemsParams,
        execute=_handle_get_user_collection_items,
    ),
    ToolDefinition(
        name="add_release_to_user_collection_folder",
        description="Add a release to a collection folder.",
        parameters=AddToFolderParams,
        execute=_handle_add_release_to_user_collection_folder,
    ),
    ToolDefinition(
        name="rate_release_in_user_collection",
        description="Rate a release instance in a user's collection.",
        parameters=RateInstanceParams,
        execute=_handle_rate_release_in_user_collection,
    ),
    ToolDefinition(
        name="move_release_in_user_collection",
        description="Move a release instance to another collection folder.",
        parameters=MoveInstanceParams,
        execute=_handle_move_release_in_user_collection,
    ),
    ToolDefinition(
        name="delete_release_from_user_collection_folder",
        description="Remove a release instance from a collection folder.",
        parameters=CollectionInstanceParams,
        execute=_handle_delete_release_from_user_collection_folder,
    ),
    ToolDefinition(
        name="get_user_collection_custom_fields",
        description="List the custom notes fields defined for a user's collection.",
        parameters=UsernameParams,
        execute=_handle_get_user_collection_custom_fields,
    ),
    ToolDefinition(
        name="edit_user_collection_custom_field_value",
        description="Set a custom field value on a collection instance.",
        parameters=CustomFieldValueParams,
        execute=_handle_edit_user_collection_custom_field_value,
    ),
    ToolDefinition(
        name="get_user_collection_value",
        description="Get the minimum, median and maximum value of a user's collection.",
        parameters=UsernameParams,
        execute=_handle_get_user_collection_value,
    ),
]
