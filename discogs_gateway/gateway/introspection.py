"""Schema introspection and result normalization for the tool gateway."""
from __future__ import annotations

import json
import types
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Dict, Iterable, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from discogs_gateway.gateway.tool_registry import ToolDefinition

UNKNOWN = "unknown"


def _common_tag(value_types: Iterable[type]) -> str:
    tags = {_type_tag(value_type) for value_type in value_types}
    return tags.pop() if len(tags) == 1 else UNKNOWN


def _type_tag(annotation: Any) -> str:
    """Map a field annotation onto a coarse JSON type tag."""
    origin = get_origin(annotation)

    if origin is Annotated:
        return _type_tag(get_args(annotation)[0])

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if not members:
            return UNKNOWN
        return _common_tag(members) if len(members) > 1 else _type_tag(members[0])

    if origin is Literal:
        return _common_tag(type(value) for value in get_args(annotation))

    if origin is not None:
        annotation = origin

    if not isinstance(annotation, type):
        return UNKNOWN

    if issubclass(annotation, Enum):
        return _common_tag(type(member.value) for member in annotation)
    # bool is an int subclass
    if issubclass(annotation, bool):
        return "boolean"
    if issubclass(annotation, (str, bytes)):
        return "string"
    if issubclass(annotation, (int, float, Decimal)):
        return "number"
    if issubclass(annotation, (BaseModel, Mapping)):
        return "object"
    if issubclass(annotation, (Sequence, Set)):
        return "array"
    return UNKNOWN


def describe_parameters(schema: Any) -> Dict[str, Dict[str, Any]]:
    """Describe each declared input field of a parameter schema.

    Returns a mapping of field name to ``{"type", "required", "description"}``.
    Schemas that are not pydantic models have no enumerable fields and are
    described as an empty mapping.
    """
    if isinstance(schema, BaseModel):
        schema = type(schema)
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        return {}

    parameters: Dict[str, Dict[str, Any]] = {}
    for field_name, field_info in schema.model_fields.items():
        parameters[field_info.alias or field_name] = {
            "type": _type_tag(field_info.annotation),
            "required": field_info.is_required(),
            "description": field_info.description or "",
        }
    return parameters


def describe_tool(definition: ToolDefinition) -> Dict[str, Any]:
    """Build the discovery record for a registered tool."""
    return {
        "name": definition.name,
        "description": definition.description,
        "parameters": describe_parameters(definition.parameters),
    }


def normalize_result(result: Any) -> Any:
    """Decode JSON string results, passing everything else through unchanged."""
    if not isinstance(result, str):
        return result
    try:
        return json.loads(result)
    except (ValueError, RecursionError):
        return result
