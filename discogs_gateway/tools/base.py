"""Shared helpers for Discogs tool handlers."""
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from discogs_gateway.services.discogs_client import DiscogsClient
from discogs_gateway.utils.exceptions import ToolInputError

ParamsT = TypeVar("ParamsT", bound=BaseModel)


def parse_arguments(model: Type[ParamsT], args: Any) -> ParamsT:
    """Validate raw tool arguments against the tool's parameter schema."""
    try:
        return model.model_validate(args)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ToolInputError(f"Invalid arguments: {problems}") from exc


def query_params(params: BaseModel, *exclude: str) -> Dict[str, Any]:
    """Dump set, non-null arguments as query string parameters."""
    return params.model_dump(exclude_none=True, exclude=set(exclude))


def body_params(params: BaseModel, *exclude: str) -> Dict[str, Any]:
    """Dump set, non-null arguments as a JSON request body."""
    return params.model_dump(exclude_none=True, exclude=set(exclude))


def segment(value: Any) -> str:
    """Escape a value for use as a single URL path segment."""
    return quote(str(value), safe="")


async def resolve_username(client: DiscogsClient, username: Optional[str]) -> str:
    """Return the given username or that of the authenticated user."""
    if username and username.strip():
        return username.strip()
    identity = await client.get("/oauth/identity")
    resolved = identity.get("username") if isinstance(identity, dict) else None
    if not resolved:
        raise ToolInputError("username is required when no authenticated Discogs user is configured")
    return resolved


async def user_path(client: DiscogsClient, username: Optional[str]) -> str:
    """``/users/<name>`` for the given or authenticated user, safely escaped."""
    return f"/users/{segment(await resolve_username(client, username))}"


def to_json(payload: Any) -> str:
    return json.dumps(payload)
