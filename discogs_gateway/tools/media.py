"""Discogs media tools."""
from __future__ import annotations

import base64
from typing import Any, Dict
from urllib.parse import urlsplit

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.services.discogs_client import get_discogs_client
from discogs_gateway.tools.base import parse_arguments, to_json
from discogs_gateway.tools.schemas import ImageParams
from discogs_gateway.utils.exceptions import ToolInputError

IMAGE_HOST_SUFFIX = ".discogs.com"


def _check_image_url(url: str) -> str:
    parts = urlsplit(url.strip())
    host = (parts.hostname or "").lower()
    if parts.scheme != "https" or not (host == "discogs.com" or host.endswith(IMAGE_HOST_SUFFIX)):
        raise ToolInputError("url must be an https URL on a discogs.com host")
    return parts.geturl()


async def _handle_fetch_image(args: Dict[str, Any], _: ToolContext) -> str:
    params = parse_arguments(ImageParams, args)
    url = _check_image_url(params.url)
    response = await get_discogs_client().fetch(url)
    content_type = response.headers.get("content-type", "application/octet-stream").split(";")[0].strip()
    if not content_type.startswith("image/"):
        raise ToolInputError(f"url did not return an image (content type {content_type})")
    return to_json(
        {
            "url": url,
            "content_type": content_type,
            "size": len(response.content),
            "data": base64.b64encode(response.content).decode("ascii"),
        }
    )


TOOLS = [
    ToolDefinition(
        name="fetch_image",
        description="Fetch a Discogs image (cover art, artist photo) as base64 data.",
        parameters=ImageParams,
        execute=_handle_fetch_image,
    ),
]
