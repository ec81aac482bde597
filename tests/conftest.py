from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from mcp_service.app.dispatcher import McpDispatcher
from mcp_service.app.streaming import StreamChunker
from mcp_service.app.tools.echo import EchoTool
from mcp_service.app.tools.get_time import GetTimeTool
from mcp_service.app.tools.http_request import HttpRequestTool
from mcp_service.app.tools.invoker import ToolInvoker
from mcp_service.app.tools.registry import ToolRegistry

FIXED_NOW = datetime(2024, 11, 5, 12, 30, 45, 123456, tzinfo=timezone.utc)


def _fake_upstream(request: httpx.Request) -> httpx.Response:
    """테스트용 외부 API예요. `unreachable.test`는 연결 실패를 흉내 내요."""
    if request.url.host == "unreachable.test":
        raise httpx.ConnectError("Connection refused", request=request)
    body = request.content.decode("utf-8")
    return httpx.Response(201 if body else 200, text=f"{request.method} {request.url.path} {body}".strip())


@pytest.fixture
def http_transport() -> httpx.MockTransport:
    return httpx.MockTransport(_fake_upstream)


@pytest.fixture
def tool_registry(http_transport: httpx.MockTransport) -> ToolRegistry:
    """각 테스트용으로 새로 생성한 기본 도구 레지스트리예요. 시계와 네트워크는 고정돼요."""
    registry = ToolRegistry()
    registry.register(EchoTool())
    registry.register(GetTimeTool(clock=lambda: FIXED_NOW))
    registry.register(HttpRequestTool(transport=http_transport))
    return registry


@pytest.fixture
def dispatcher(tool_registry: ToolRegistry) -> McpDispatcher:
    return McpDispatcher(registry=tool_registry, invoker=ToolInvoker(tool_registry))


@pytest.fixture
def chunker(dispatcher: McpDispatcher) -> StreamChunker:
    return StreamChunker(dispatcher, delay_seconds=0)
