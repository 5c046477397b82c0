"""Central registry for tool declarations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterable, Iterator, Optional, Union

from discogs_gateway.gateway.models import ToolContext
from discogs_gateway.utils.exceptions import DuplicateToolError

ToolResult = Union[str, Dict[str, Any], list, Any]
ToolHandler = Callable[[Dict[str, Any], ToolContext], Union[Awaitable[ToolResult], ToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """Pairing of tool metadata and parameter schema with its callable handler."""

    name: str
    description: str
    parameters: Any
    execute: ToolHandler

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Tool name must be a non-empty string")


class ToolRegistry:
    """Read-only mapping from tool name to definition, built once at startup.

    Registration order is preserved so that discovery output and the list of
    available names returned for unknown tools are deterministic.
    """

    def __init__(self, tools: Iterable[ToolDefinition] = ()):
        registry: Dict[str, ToolDefinition] = {}
        for tool in tools:
            if tool.name in registry:
                raise DuplicateToolError(tool.name)
            registry[tool.name] = tool
        self._tools = registry

    def get(self, tool_name: str) -> Optional[ToolDefinition]:
        """Retrieve a tool definition by name, or None when unknown."""
        return self._tools.get(tool_name)

    def list_tools(self) -> list[ToolDefinition]:
        """Return all registered definitions in registration order."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())
