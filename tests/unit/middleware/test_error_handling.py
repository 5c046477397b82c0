"""Tests for the tool error middleware."""
import json
import logging

import pytest
from unittest.mock import AsyncMock, Mock

from discogs_gateway.middleware.error_handling import (
    DEFAULT_ERROR_MESSAGE,
    ToolErrorMiddleware,
    failure_message,
    tool_name_from_request,
)


def _make_request(path="/api/tools/search", path_params=None):
    """Build a mock request."""
    request = Mock()
    request.url = Mock(path=path)
    request.path_params = path_params if path_params is not None else {}
    return request


class TestFailureMessage:
    """Tests for failure_message."""

    def test_uses_exception_text(self):
        assert failure_message(RuntimeError("upstream unavailable")) == "upstream unavailable"

    def test_falls_back_when_message_is_empty(self):
        assert failure_message(RuntimeError()) == DEFAULT_ERROR_MESSAGE

    def test_falls_back_when_str_fails(self):
        class Unprintable(Exception):
            def __str__(self):
                raise ValueError("cannot render")

        assert failure_message(Unprintable()) == DEFAULT_ERROR_MESSAGE


class TestToolNameFromRequest:
    """Tests for tool_name_from_request."""

    def test_prefers_path_params(self):
        assert tool_name_from_request(_make_request(path_params={"name": "get_artist"})) == "get_artist"

    def test_falls_back_to_tool_path(self):
        assert tool_name_from_request(_make_request(path="/api/tools/get_release")) == "get_release"

    def test_none_outside_tool_paths(self):
        assert tool_name_from_request(_make_request(path="/health")) is None

    def test_none_for_bare_prefix(self):
        assert tool_name_from_request(_make_request(path="/api/tools/")) is None


class TestToolErrorMiddleware:
    """Tests for ToolErrorMiddleware."""

    @pytest.mark.asyncio
    async def test_passes_successful_responses_through(self):
        middleware = ToolErrorMiddleware(Mock())
        response = Mock(status_code=200)
        call_next = AsyncMock(return_value=response)

        assert await middleware.dispatch(_make_request(), call_next) is response

    @pytest.mark.asyncio
    async def test_converts_failures_to_500(self, caplog):
        middleware = ToolErrorMiddleware(Mock())
        call_next = AsyncMock(side_effect=RuntimeError("upstream unavailable"))
        request = _make_request(path="/api/tools/flaky", path_params={"name": "flaky"})

        with caplog.at_level(logging.ERROR, logger="discogs_gateway.middleware.error_handling"):
            response = await middleware.dispatch(request, call_next)

        assert response.status_code == 500
        assert json.loads(response.body) == {"error": "upstream unavailable", "tool": "flaky"}
        assert "Tool flaky failed: upstream unavailable" in caplog.text

    @pytest.mark.asyncio
    async def test_reports_null_tool_outside_tool_paths(self):
        middleware = ToolErrorMiddleware(Mock())
        call_next = AsyncMock(side_effect=RuntimeError())

        response = await middleware.dispatch(_make_request(path="/health"), call_next)

        assert json.loads(response.body) == {"error": DEFAULT_ERROR_MESSAGE, "tool": None}
