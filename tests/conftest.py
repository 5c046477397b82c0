"""Configuration for pytest."""
import json
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.main import create_app


class EchoParams(BaseModel):
    message: str = Field(..., description="Text to echo back")
    repeat: Optional[int] = Field(default=None, description="How many times to repeat it")


async def _echo(args, _context):
    return json.dumps(args)


async def _plain_text(args, _context):
    return "ok"


async def _json_text(args, _context):
    return '{"a":1}'


async def _upstream_failure(args, _context):
    raise RuntimeError("upstream unavailable")


async def _silent_failure(args, _context):
    raise RuntimeError()


def _sync_tool(args, _context):
    return {"sync": True, "received": args}


@pytest.fixture
def fake_tools():
    """Small, deterministic tool set that never touches the network."""
    return [
        ToolDefinition(name="echo", description="Echo the arguments as JSON text.", parameters=EchoParams, execute=_echo),
        ToolDefinition(name="plain_text", description="Return a non-JSON string.", parameters=None, execute=_plain_text),
        ToolDefinition(name="json_text", description="Return a JSON object as text.", parameters=None, execute=_json_text),
        ToolDefinition(name="flaky", description="Always fails upstream.", parameters=None, execute=_upstream_failure),
        ToolDefinition(name="silent", description="Fails without a message.", parameters=None, execute=_silent_failure),
        ToolDefinition(name="sync_tool", description="Synchronous handler.", parameters={}, execute=_sync_tool),
    ]


@pytest.fixture
def client(fake_tools):
    """Test client around an app built from the fake tools."""
    app = create_app(tools=fake_tools)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
