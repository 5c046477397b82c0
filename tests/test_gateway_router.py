"""Tests for the tool gateway endpoints."""
from __future__ import annotations

import threading

import pytest
from fastapi.testclient import TestClient

from discogs_gateway.config import Settings
from discogs_gateway.gateway.tool_registry import ToolDefinition
from discogs_gateway.main import create_app
from discogs_gateway.tools import ALL_TOOLS
from discogs_gateway.utils.exceptions import DuplicateToolError
from discogs_gateway.version import VERSION


def test_health_reports_tool_count(client, fake_tools):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "service": "discogs-mcp",
        "version": VERSION,
        "toolsCount": len(fake_tools),
    }


def test_health_is_independent_of_tool_behaviour(client):
    client.post("/api/tools/flaky", json={})
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["toolsCount"] == 6


def test_list_tools_includes_every_registered_tool_once(client, fake_tools):
    response = client.get("/api/tools")
    assert response.status_code == 200
    data = response.json()

    names = [tool["name"] for tool in data["tools"]]
    assert names == [tool.name for tool in fake_tools]
    assert data["toolsCount"] == len(fake_tools)
    assert data["service"] == "discogs-mcp"
    assert data["version"] == VERSION
    assert data["description"]
    assert data["usage"]["endpoint"] == "POST /api/tools/:toolName"
    assert data["usage"]["example"]["url"] == "/api/tools/search"


def test_list_tools_describes_parameters(client):
    data = client.get("/api/tools").json()
    echo = next(tool for tool in data["tools"] if tool["name"] == "echo")

    assert echo["description"] == "Echo the arguments as JSON text."
    assert echo["parameters"] == {
        "message": {"type": "string", "required": True, "description": "Text to echo back"},
        "repeat": {"type": "number", "required": False, "description": "How many times to repeat it"},
    }


def test_list_tools_reports_no_parameters_for_non_model_schemas(client):
    data = client.get("/api/tools").json()
    plain = next(tool for tool in data["tools"] if tool["name"] == "plain_text")
    assert plain["parameters"] == {}


def test_invoke_decodes_json_string_result(client):
    response = client.post("/api/tools/json_text", json={})
    assert response.status_code == 200
    assert response.json() == {"success": True, "tool": "json_text", "result": {"a": 1}}


def test_invoke_keeps_plain_string_result(client):
    response = client.post("/api/tools/plain_text", json={})
    assert response.status_code == 200
    assert response.json()["result"] == "ok"


def test_invoke_passes_arguments_to_tool(client):
    response = client.post("/api/tools/echo", json={"message": "hi", "repeat": 2})
    assert response.status_code == 200
    assert response.json()["result"] == {"message": "hi", "repeat": 2}


def test_invoke_without_body_uses_empty_arguments(client):
    response = client.post("/api/tools/echo")
    assert response.status_code == 200
    assert response.json()["result"] == {}


def test_invoke_supports_synchronous_handlers(client):
    response = client.post("/api/tools/sync_tool", json={"x": 1})
    assert response.status_code == 200
    assert response.json()["result"] == {"sync": True, "received": {"x": 1}}


def test_invoke_unknown_tool_returns_404_with_available_names(client, fake_tools):
    response = client.post("/api/tools/does-not-exist", json={"anything": True})
    assert response.status_code == 404
    assert response.json() == {
        "error": "Tool 'does-not-exist' not found",
        "available": [tool.name for tool in fake_tools],
    }


def test_invoke_failure_returns_500_with_message(client):
    response = client.post("/api/tools/flaky", json={})
    assert response.status_code == 500
    assert response.json() == {"error": "upstream unavailable", "tool": "flaky"}


def test_invoke_failure_without_message_uses_fallback(client):
    response = client.post("/api/tools/silent", json={})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "tool": "silent"}


def test_unknown_tool_with_malformed_body_returns_404(client, fake_tools):
    response = client.post(
        "/api/tools/does-not-exist",
        content="{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 404
    assert response.json() == {
        "error": "Tool 'does-not-exist' not found",
        "available": [tool.name for tool in fake_tools],
    }


def test_unknown_tool_with_array_body_returns_404(client):
    response = client.post("/api/tools/does-not-exist", json=[1, 2, 3])
    assert response.status_code == 404
    assert response.json()["error"] == "Tool 'does-not-exist' not found"


def test_known_tool_with_malformed_body_fails_with_500(client):
    response = client.post(
        "/api/tools/echo",
        content="{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Request body must be valid JSON", "tool": "echo"}


def test_non_object_body_is_passed_to_tool(client):
    response = client.post("/api/tools/echo", json=[1, 2, 3])
    assert response.status_code == 200
    assert response.json() == {"success": True, "tool": "echo", "result": [1, 2, 3]}


def test_failure_response_carries_cors_headers(client):
    response = client.post("/api/tools/flaky", json={}, headers={"Origin": "http://example.com"})
    assert response.status_code == 500
    assert response.json() == {"error": "upstream unavailable", "tool": "flaky"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_not_found_response_carries_cors_headers(client):
    response = client.post("/api/tools/missing", json={}, headers={"Origin": "http://example.com"})
    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "*"


def test_endpoints_report_settings_passed_to_create_app(fake_tools):
    settings = Settings(app_name="custom-gw", service_description="Custom gateway")
    app = create_app(tools=fake_tools, settings=settings)

    with TestClient(app) as test_client:
        health = test_client.get("/health").json()
        listing = test_client.get("/api/tools").json()

    assert health["service"] == "custom-gw"
    assert listing["service"] == "custom-gw"
    assert listing["description"] == "Custom gateway"
    assert app.title == "custom-gw"


def test_restricted_cors_origins_from_settings(fake_tools):
    settings = Settings(cors_origins="http://allowed.example")
    app = create_app(tools=fake_tools, settings=settings)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        allowed = test_client.post("/api/tools/flaky", headers={"Origin": "http://allowed.example"})
        other = test_client.post("/api/tools/flaky", headers={"Origin": "http://other.example"})

    assert allowed.headers["access-control-allow-origin"] == "http://allowed.example"
    assert "access-control-allow-origin" not in other.headers


def test_synchronous_handlers_run_off_the_event_loop():
    async def loop_thread(args, _context):
        return {"thread": threading.get_ident()}

    def worker_thread(args, _context):
        return {"thread": threading.get_ident()}

    app = create_app(
        tools=[
            ToolDefinition(name="loop_thread", description="Async handler.", parameters=None, execute=loop_thread),
            ToolDefinition(name="worker_thread", description="Sync handler.", parameters=None, execute=worker_thread),
        ]
    )
    with TestClient(app) as test_client:
        loop_ident = test_client.post("/api/tools/loop_thread").json()["result"]["thread"]
        worker_ident = test_client.post("/api/tools/worker_thread").json()["result"]["thread"]

    assert loop_ident != worker_ident


def test_duplicate_tool_names_fail_app_construction(fake_tools):
    with pytest.raises(DuplicateToolError):
        create_app(tools=fake_tools + [fake_tools[0]])


def test_default_app_exposes_discogs_tools():
    app = create_app()
    with TestClient(app) as test_client:
        data = test_client.get("/api/tools").json()

    names = [tool["name"] for tool in data["tools"]]
    assert names == [tool.name for tool in ALL_TOOLS]
    assert len(set(names)) == len(names)
    assert data["toolsCount"] == len(ALL_TOOLS)

    search = next(tool for tool in data["tools"] if tool["name"] == "search")
    assert search["parameters"]["q"] == {
        "type": "string",
        "required": False,
        "description": "Free-text search query",
    }
    get_artist = next(tool for tool in data["tools"] if tool["name"] == "get_artist")
    assert get_artist["parameters"]["artist_id"]["type"] == "number"
    assert get_artist["parameters"]["artist_id"]["required"] is True
