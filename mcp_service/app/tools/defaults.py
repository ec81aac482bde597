"""기본 도구를 등록한 ToolRegistry를 생성하는 팩토리예요."""

from __future__ import annotations

import httpx

from mcp_service.app.tools.echo import EchoTool
from mcp_service.app.tools.get_time import GetTimeTool
from mcp_service.app.tools.http_request import HttpRequestTool
from mcp_service.app.tools.registry import ToolRegistry


def build_default_tool_registry(
    *,
    http_timeout_seconds: float = 30.0,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> ToolRegistry:
    """기본 도구가 모두 등록된 `ToolRegistry`를 생성해요.

    Args:
        http_timeout_seconds: `http_request` 도구의 요청 제한 시간이에요.
        http_transport: `http_request` 도구가 쓸 httpx 트랜스포트예요. 테스트용이에요.

    Returns:
        echo, get_time, http_request 순서로 등록된 `ToolRegistry` 인스턴스예요.
    """
    registry = ToolRegistry()
    registry.register(EchoTool())
    registry.register(GetTimeTool())
    registry.register(HttpRequestTool(timeout_seconds=http_timeout_seconds, transport=http_transport))
    return registry
