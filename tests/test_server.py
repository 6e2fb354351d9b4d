"""
Integration tests for the HTTP transport.

Drives the FastAPI app in-process through httpx's ASGI transport.
"""

import re

import pytest

TIME_PATTERN = re.compile(
    r"^(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday), "
    r"(January|February|March|April|May|June|July|August|September|October|November|December) "
    r"\d{1,2}, \d{4} at \d{1,2}:\d{2}:\d{2} (AM|PM)$"
)


def _call(request_id, name, arguments=None):
    params = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    return {"jsonrpc": "2.0", "id": request_id, "method": "tools/call", "params": params}


class TestServerEndpoints:
    """Non-MCP endpoints."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_tools_endpoint(self, client):
        response = await client.get("/tools")

        assert response.status_code == 200
        data = response.json()
        assert data["server"] == "mcp-poc"
        assert [t["name"] for t in data["tools"]] == [
            "greet",
            "addNumbers",
            "getCurrentTime",
            "reverseString",
        ]


class TestMcpEndpoint:
    """MCP JSON-RPC over HTTP POST."""

    @pytest.mark.asyncio
    async def test_initialize(self, client):
        response = await client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 1, "method": "initialize"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 1
        assert "protocolVersion" in data["result"]

    @pytest.mark.asyncio
    async def test_tools_list(self, client):
        response = await client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        )

        data = response.json()
        tools = {t["name"]: t for t in data["result"]["tools"]}
        assert len(tools) == 4
        assert tools["reverseString"]["inputSchema"] == {
            "type": "object",
            "properties": {"text": {"type": "string", "description": "The text to reverse"}},
            "required": ["text"],
        }

    @pytest.mark.asyncio
    async def test_greet(self, client):
        response = await client.post("/mcp", json=_call(3, "greet", {"name": "World"}))

        result = response.json()["result"]
        assert result["isError"] is False
        assert result["content"][0]["text"] == "Hello, World! Welcome to the MCP server."

    @pytest.mark.asyncio
    async def test_add_numbers_wraps(self, client):
        response = await client.post(
            "/mcp", json=_call(4, "addNumbers", {"a": 2147483647, "b": 1})
        )

        assert response.json()["result"]["content"][0]["text"] == "-2147483648"

    @pytest.mark.asyncio
    async def test_get_current_time(self, client):
        response = await client.post("/mcp", json=_call(5, "getCurrentTime"))

        text = response.json()["result"]["content"][0]["text"]
        assert TIME_PATTERN.match(text)

    @pytest.mark.asyncio
    async def test_reverse_string(self, client):
        response = await client.post("/mcp", json=_call(6, "reverseString", {"text": "abc"}))

        assert response.json()["result"]["content"][0]["text"] == "cba"

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, client):
        response = await client.post("/mcp", json=_call(7, "addNumbers", {"a": 1}))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 7
        assert data["error"]["code"] == -32602  # INVALID_PARAMS
        assert data["error"]["data"]["errors"] == ["Missing required parameter: 'b'"]

    @pytest.mark.asyncio
    async def test_unknown_tool(self, client):
        response = await client.post("/mcp", json=_call(8, "launchRockets", {}))

        assert response.json()["error"]["code"] == -32602

    @pytest.mark.asyncio
    async def test_invalid_json(self, client):
        response = await client.post(
            "/mcp",
            content="not valid json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] is None
        assert data["error"]["code"] == -32700  # PARSE_ERROR

    @pytest.mark.asyncio
    async def test_invalid_request(self, client):
        response = await client.post("/mcp", json={"invalid": "request"})

        assert response.status_code == 200
        assert response.json()["error"]["code"] == -32600  # INVALID_REQUEST

    @pytest.mark.asyncio
    async def test_non_object_request(self, client):
        response = await client.post("/mcp", json=[1, 2, 3])

        assert response.json()["error"]["code"] == -32600

    @pytest.mark.asyncio
    async def test_notification_gets_no_reply(self, client):
        response = await client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "method": "notifications/initialized"},
        )

        assert response.status_code == 202
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_unknown_method(self, client):
        response = await client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 9, "method": "unknown/method"},
        )

        assert response.json()["error"]["code"] == -32601  # METHOD_NOT_FOUND


class TestInvokeEndpoint:
    """The plain {"operation", "arguments"} call shape."""

    @pytest.mark.asyncio
    async def test_add_numbers_returns_integer(self, client):
        response = await client.post(
            "/invoke", json={"operation": "addNumbers", "arguments": {"a": 2, "b": 3}}
        )

        assert response.status_code == 200
        assert response.json() == {"result": 5}

    @pytest.mark.asyncio
    async def test_greet_returns_string(self, client):
        response = await client.post(
            "/invoke", json={"operation": "greet", "arguments": {"name": "World"}}
        )

        assert response.json() == {"result": "Hello, World! Welcome to the MCP server."}

    @pytest.mark.asyncio
    async def test_arguments_default_to_empty(self, client):
        response = await client.post("/invoke", json={"operation": "getCurrentTime"})

        assert TIME_PATTERN.match(response.json()["result"])

    @pytest.mark.asyncio
    async def test_unknown_operation(self, client):
        response = await client.post("/invoke", json={"operation": "nope"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, client):
        response = await client.post(
            "/invoke", json={"operation": "reverseString", "arguments": {"text": 12}}
        )

        assert response.status_code == 422
        assert response.json()["detail"]["tool"] == "reverseString"
