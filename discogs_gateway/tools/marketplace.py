"""Discogs marketplace tools: inventory, listings, orders and price statistics."""
from __future__ import annotations

from typing import Any, Dict

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import body_params, parse_arguments, query_params, segment, to_json, user_path
from discogs_gateway.tools.schemas import (
    CreateOrderMessageParams,
    DeleteListingParams,
    EditOrderParams,
    InventoryParams,
    ListingFields,
    ListingParams,
    OrderMessagesParams,
    OrderParams,
    OrdersParams,
    ReleaseStatsParams,
    UpdateListingParams,
)
from discogs_gateway.utils.exceptions import ToolInputError


async def _handle_get_user_inventory(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(InventoryParams, args)
    client = get_discogs_client()
    path = await user_path(client, params.username)
    return to_json(await client.get(f"{path}/inventory", params=query_params(params, "username")))


async def _handle_get_marketplace_listing(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ListingParams, args)
    payload = await get_discogs_client().get(
        f"/marketplace/listings/{params.listing_id}",
        params=query_params(params, "listing_id"),
    )
    return to_json(payload)


async def _handle_create_marketplace_listing(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ListingFields, args)
    return to_json(await get_discogs_client().post("/marketplace/listings", json=body_params(params)))


async def _handle_update_marketplace_listing(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(UpdateListingParams, args)
    client = get_discogs_client()
    await client.post(f"/marketplace/listings/{params.listing_id}", json=body_params(params, "listing_id"))
    return to_json({"updated": True, "listing_id": params.listing_id})


async def _handle_delete_marketplace_listing(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(DeleteListingParams, args)
    await get_discogs_client().delete(f"/marketplace/listings/{params.listing_id}")
    return to_json({"deleted": True, "listing_id": params.listing_id})


async def _handle_get_marketplace_order(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(OrderParams, args)
    return to_json(await get_discogs_client().get(f"/marketplace/orders/{segment(params.order_id)}"))


async def _handle_edit_marketplace_order(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(EditOrderParams, args)
    changes = body_params(params, "order_id")
    if not changes:
        raise ToolInputError("Provide a status or shipping value to change")
    payload = await get_discogs_client().post(f"/marketplace/orders/{segment(params.order_id)}", json=changes)
    return to_json(payload)


async def _handle_get_marketplace_orders(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(OrdersParams, args)
    query = query_params(params)
    if "archived" in query:
        query["archived"] = str(query["archived"]).lower()
    return to_json(await get_discogs_client().get("/marketplace/orders", params=query))


async def _handle_get_marketplace_order_messages(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(OrderMessagesParams, args)
    payload = await get_discogs_client().get(
        f"/marketplace/orders/{segment(params.order_id)}/messages",
        params=query_params(params, "order_id"),
    )
    return to_json(payload)


async def _handle_create_marketplace_order_message(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(CreateOrderMessageParams, args)
    message = body_params(params, "order_id")
    if not message:
        raise ToolInputError("Provide a message, a status, or both")
    payload = await get_discogs_client().post(
        f"/marketplace/orders/{segment(params.order_id)}/messages",
        json=message,
    )
    return to_json(payload)


async def _handle_get_marketplace_release_stats(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ReleaseStatsParams, args)
    payload = await get_discogs_client().get(
        f"/marketplace/stats/{params.release_id}",
        params=query_params(params, "release_id"),
    )
    return to_json(payload)


TOOLS = [
    ToolDefinition(
        name="get_user_inventory",
        description="List a seller's marketplace inventory.",
        parameters=InventoryParams,
        execute=_handle_get_user_inventory,
    ),
    ToolDefinition(
        name="get_marketplace_listing",
        description="Get a single marketplace listing with price and condition.",
        parameters=ListingParams,
        execute=_handle_get_marketplace_listing,
    ),
    ToolDefinition(
        name="create_marketplace_listing",
        description="Create a marketplace listing for a release.",
        parameters=ListingFields,
        execute=_handle_create_marketplace_listing,
    ),
    ToolDefinition(
        name="update_marketplace_listing",
        description="Replace the details of an existing marketplace listing.",
        parameters=UpdateListingParams,
        execute=_handle_update_marketplace_listing,
    ),
    ToolDefinition(
        name="delete_marketplace_listing",
        description="Delete a marketplace listing.",
        parameters=DeleteListingParams,
        execute=_handle_delete_marketplace_listing,
    ),
    ToolDefinition(
        name="get_marketplace_order",
        description="Get a marketplace order you bought or sold.",
        parameters=OrderParams,
        execute=_handle_get_marketplace_order,
    ),
    ToolDefinition(
        name="edit_marketplace_order",
        description="Change the status or shipping cost of a marketplace order.",
        parameters=EditOrderParams,
        execute=_handle_edit_marketplace_order,
    ),
    ToolDefinition(
        name="get_marketplace_orders",
        description="List the authenticated seller's marketplace orders.",
        parameters=OrdersParams,
        execute=_handle_get_marketplace_orders,
    ),
    ToolDefinition(
        name="get_marketplace_order_messages",
        description="List the messages attached to a marketplace order.",
        parameters=OrderMessagesParams,
        execute=_handle_get_marketplace_order_messages,
    ),
    ToolDefinition(
        name="create_marketplace_order_message",
        description="Send a message on a marketplace order, optionally changing its status.",
        parameters=CreateOrderMessageParams,
        execute=_handle_create_marketplace_order_message,
    ),
    ToolDefinition(
        name="get_marketplace_release_stats",
        description="Get marketplace statistics (lowest price, copies for sale) for a release.",
        parameters=ReleaseStatsParams,
        execute=_handle_get_marketplace_release_stats,
    ),
]
