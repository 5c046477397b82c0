"""Discogs tool definitions, grouped by category in registration order."""
from discogs_gateway.tools import (
    database,
    inventory_export,
    marketplace,
    media,
    user_collection,
    user_identity,
    user_lists,
    user_wantlist,
)

TOOL_CATEGORIES = {
    "Database": database.TOOLS,
    "Marketplace": marketplace.TOOLS,
    "User Collection": user_collection.TOOLS,
    "User Identity": user_identity.TOOLS,
    "User Wantlist": user_wantlist.TOOLS,
    "User Lists": user_lists.TOOLS,
    "Inventory Export": inventory_export.TOOLS,
    "Media": media.TOOLS,
}

ALL_TOOLS = [tool for tools in TOOL_CATEGORIES.values() for tool in tools]

__all__ = ["ALL_TOOLS", "TOOL_CATEGORIES"]
