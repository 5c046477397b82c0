"""Discogs database tools: search, artists, releases, masters and labels."""
from __future__ import annotations

from typing import Any, Dict

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import parse_arguments, query_params, resolve_username, segment, to_json
from discogs_gateway.tools.schemas import (
    ArtistParams,
    ArtistReleasesParams,
    CommunityRatingParams,
    EditReleaseRatingParams,
    LabelParams,
    LabelReleasesParams,
    MasterReleaseParams,
    MasterReleaseVersionsParams,
    ReleaseParams,
    ReleaseRatingParams,
    SearchParams,
)
from discogs_gateway.utils.exceptions import ToolInputError


async def _handle_search(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(SearchParams, args)
    query = query_params(params)
    if not query.keys() - {"page", "per_page"}:
        raise ToolInputError("Provide a query (q) or at least one search filter")
    return to_json(await get_discogs_client().get("/database/search", params=query))


async def _handle_get_artist(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ArtistParams, args)
    return to_json(await get_discogs_client().get(f"/artists/{params.artist_id}"))


async def _handle_get_artist_releases(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ArtistReleasesParams, args)
    payload = await get_discogs_client().get(
        f"/artists/{params.artist_id}/releases",
        params=query_params(params, "artist_id"),
    )
    return to_json(payload)


async def _handle_get_release(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ReleaseParams, args)
    payload = await get_discogs_client().get(
        f"/releases/{params.release_id}",
        params=query_params(params, "release_id"),
    )
    return to_json(payload)


async def _handle_get_master_release(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(MasterReleaseParams, args)
    return to_json(await get_discogs_client().get(f"/masters/{params.master_id}"))


async def _handle_get_master_release_versions(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(MasterReleaseVersionsParams, args)
    payload = await get_discogs_client().get(
        f"/masters/{params.master_id}/versions",
        params=query_params(params, "master_id"),
    )
    return to_json(payload)


async def _handle_get_label(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(LabelParams, args)
    return to_json(await get_discogs_client().get(f"/labels/{params.label_id}"))


async def _handle_get_label_releases(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(LabelReleasesParams, args)
    payload = await get_discogs_client().get(
        f"/labels/{params.label_id}/releases",
        params=query_params(params, "label_id"),
    )
    return to_json(payload)


async def _rating_path(client, params: ReleaseRatingParams) -> str:
    username = await resolve_username(client, params.username)
    return f"/releases/{params.release_id}/rating/{segment(username)}"


async def _handle_get_release_rating_by_user(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ReleaseRatingParams, args)
    client = get_discogs_client()
    return to_json(await client.get(await _rating_path(client, params)))


async def _handle_edit_release_rating(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(EditReleaseRatingParams, args)
    client = get_discogs_client()
    return to_json(await client.put(await _rating_path(client, params), json={"rating": params.rating}))


async def _handle_delete_release_rating(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ReleaseRatingParams, args)
    client = get_discogs_client()
    await client.delete(await _rating_path(client, params))
    return to_json({"deleted": True, "release_id": params.release_id})


async def _handle_get_release_community_rating(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(CommunityRatingParams, args)
    return to_json(await get_discogs_client().get(f"/releases/{params.release_id}/rating"))


TOOLS = [
    ToolDefinition(
        name="search",
        description="Search the Discogs database for releases, masters, artists and labels.",
        parameters=SearchParams,
        execute=_handle_search,
    ),
    ToolDefinition(
        name="get_artist",
        description="Get an artist's profile, members, aliases and links.",
        parameters=ArtistParams,
        execute=_handle_get_artist,
    ),
    ToolDefinition(
        name="get_artist_releases",
        description="List the releases and masters credited to an artist.",
        parameters=ArtistReleasesParams,
        execute=_handle_get_artist_releases,
    ),
    ToolDefinition(
        name="get_release",
        description="Get a release with tracklist, credits, formats and identifiers.",
        parameters=ReleaseParams,
        execute=_handle_get_release,
    ),
    ToolDefinition(
        name="get_master_release",
        description="Get a master release grouping all versions of an album.",
        parameters=MasterReleaseParams,
        execute=_handle_get_master_release,
    ),
    ToolDefinition(
        name="get_master_release_versions",
        description="List every version (pressing, format, country) of a master release.",
        parameters=MasterReleaseVersionsParams,
        execute=_handle_get_master_release_versions,
    ),
    ToolDefinition(
        name="get_label",
        description="Get a label's profile, parent label and sublabels.",
        parameters=LabelParams,
        execute=_handle_get_label,
    ),
    ToolDefinition(
        name="get_label_releases",
        description="List the releases published by a label.",
        parameters=LabelReleasesParams,
        execute=_handle_get_label_releases,
    ),
    ToolDefinition(
        name="get_release_rating_by_user",
        description="Get the rating a user gave to a release.",
        parameters=ReleaseRatingParams,
        execute=_handle_get_release_rating_by_user,
    ),
    ToolDefinition(
        name="edit_release_rating",
        description="Set the rating (1-5) a user gives to a release.",
        parameters=EditReleaseRatingParams,
        execute=_handle_edit_release_rating,
    ),
    ToolDefinition(
        name="delete_release_rating",
        description="Remove a user's rating from a release.",
        parameters=ReleaseRatingParams,
        execute=_handle_delete_release_rating,
    ),
    ToolDefinition(
        name="get_release_community_rating",
        description="Get the average community rating of a release.",
        parameters=CommunityRatingParams,
        execute=_handle_get_release_community_rating,
    ),
]
