"""FastAPI 라우트 테스트예요. 앱은 ASGI 트랜스포트로 직접 호출해요."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from mcp_service.app.main import create_app
from mcp_service.app.settings import Settings


@pytest_asyncio.fixture
async def client(http_transport: httpx.MockTransport) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(Settings(stream_chunk_delay_seconds=0), http_transport=http_transport)
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://mcp.test") as client:
        yield client


def _sse_payloads(body: str) -> list[str]:
    return [event.removeprefix("data: ") for event in body.split("\n\n") if event]


@pytest.mark.asyncio
async def test_health(client: httpx.AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["server"] == "Azure Functions MCP Server"
    assert body["version"] == "1.0.0"
    assert body["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_capabilities(client: httpx.AsyncClient) -> None:
    response = await client.get("/capabilities")
    assert response.json() == {
        "protocolVersion": "2024-11-05",
        "capabilities": {
            "tools": {"listChanged": True},
            "resources": {"subscribe": True, "listChanged": True},
            "prompts": {"listChanged": True},
            "logging": {},
        },
    }


@pytest.mark.asyncio
async def test_greeting(client: httpx.AsyncClient) -> None:
    response = await client.get("/", params={"name": "mcp"})
    assert response.text.startswith("Hello, mcp! This is now an MCP Server.")


@pytest.mark.asyncio
async def test_mcp_tools_call(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {"name": "echo", "arguments": {"text": "hi"}}},
    )
    assert response.status_code == 200
    assert response.json() == {"content": [{"type": "text", "text": "Echo: hi"}], "isError": False}


@pytest.mark.asyncio
async def test_mcp_protocol_error_is_http_200(client: httpx.AsyncClient) -> None:
    response = await client.post("/mcp", json={"method": "nope"})
    assert response.status_code == 200
    assert response.json() == {"error": {"code": -32603, "message": "Unknown method: nope"}}


@pytest.mark.asyncio
async def test_mcp_malformed_body_is_http_500(client: httpx.AsyncClient) -> None:
    response = await client.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "INTERNAL_ERROR"
    assert body["message"].startswith("Invalid MCP request: ")
    assert body["trace_id"]


@pytest.mark.asyncio
async def test_mcp_stream_tool_call(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/mcp/stream",
        json={"method": "tools/call", "params": {"name": "echo", "arguments": {"text": "hello world"}}},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.headers["cache-control"] == "no-cache"

    payloads = _sse_payloads(response.text)
    assert payloads[-1] == "[DONE]"
    chunks = [json.loads(payload) for payload in payloads[:-1]]
    assert "".join(chunk["content"][0]["text"] for chunk in chunks) == "Echo: hello world"
    assert [chunk["partial"] for chunk in chunks] == [True] * (len(chunks) - 1) + [False]


@pytest.mark.asyncio
async def test_mcp_stream_non_tool_method_is_single_event(client: httpx.AsyncClient) -> None:
    response = await client.post("/mcp/stream", json={"method": "tools/list"})
    payloads = _sse_payloads(response.text)
    assert len(payloads) == 2
    assert [tool["name"] for tool in json.loads(payloads[0])["tools"]] == ["echo", "get_time", "http_request"]
    assert payloads[1] == "[DONE]"


@pytest.mark.asyncio
async def test_mcp_stream_malformed_body_yields_error_then_done(client: httpx.AsyncClient) -> None:
    response = await client.post("/mcp/stream", content=b"garbage")
    assert response.status_code == 200
    payloads = _sse_payloads(response.text)
    assert len(payloads) == 2
    assert json.loads(payloads[0])["error"]["code"] == -32603
    assert payloads[1] == "[DONE]"


@pytest.mark.asyncio
async def test_mcp_http_request_tool_through_route(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/mcp",
        json={"method": "tools/call", "params": {"name": "http_request", "arguments": {"url": "https://unreachable.test"}}},
    )
    body = response.json()
    assert body["isError"] is True
    assert body["content"][0]["text"].startswith("HTTP Request failed: ")


@pytest.mark.asyncio
async def test_cors_headers(client: httpx.AsyncClient) -> None:
    response = await client.post("/mcp", json={"method": "ping"}, headers={"Origin": "https://example.test"})
    assert response.json() == {}
    assert response.headers["access-control-allow-origin"] == "*"
