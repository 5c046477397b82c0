"""Pydantic models and helpers for the tool gateway."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParameterDescription(BaseModel):
    """Discovery-safe description of one tool input field."""

    type: str = Field(..., description="Coarse type tag, e.g. 'string' or 'number'")
    required: bool = Field(..., description="Whether callers must supply the field")
    description: str = Field(default="", description="Field documentation")


class DiscoveryRecord(BaseModel):
    """Client-facing description of a registered tool."""

    name: str
    description: str
    parameters: Dict[str, ParameterDescription] = Field(default_factory=dict)


class UsageExample(BaseModel):
    url: str
    body: Dict[str, Any] = Field(default_factory=dict)


class Usage(BaseModel):
    endpoint: str
    example: UsageExample


class HealthResponse(BaseModel):
    """Liveness check payload."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    service: str
    version: str
    tools_count: int = Field(..., alias="toolsCount")


class ToolsResponse(BaseModel):
    """Discovery payload listing every registered tool."""

    model_config = ConfigDict(populate_by_name=True)

    service: str
    version: str
    description: str
    tools_count: int = Field(..., alias="toolsCount")
    tools: List[DiscoveryRecord]
    usage: Usage


class InvokeResponse(BaseModel):
    """Successful tool invocation payload."""

    success: bool = True
    tool: str
    result: Any = None


@dataclass
class ToolContext:
    """Runtime context passed to tool handlers alongside their arguments."""

    request_id: Optional[str] = None
    extras: Dict[str, Any] = field(default_factory=dict)
