from __future__ import annotations

from dataclasses import dataclass

import httpx

from mcp_service.app.dispatcher import McpDispatcher
from mcp_service.app.mcp_protocol import ServerInfo
from mcp_service.app.settings import Settings
from mcp_service.app.streaming import StreamChunker
from mcp_service.app.tools.defaults import build_default_tool_registry
from mcp_service.app.tools.invoker import ToolInvoker
from mcp_service.app.tools.registry import ToolRegistry


@dataclass(slots=True)
class RuntimeComponents:
    tool_registry: ToolRegistry
    dispatcher: McpDispatcher
    chunker: StreamChunker


def build_runtime_components(
    settings: Settings,
    *,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> RuntimeComponents:
    """기동 시 한 번만 만들고 모든 요청이 읽기 전용으로 공유해요."""
    tool_registry = build_default_tool_registry(
        http_timeout_seconds=settings.http_request_timeout_seconds,
        http_transport=http_transport,
    )
    tool_invoker = ToolInvoker(tool_registry)
    dispatcher = McpDispatcher(
        registry=tool_registry,
        invoker=tool_invoker,
        server_info=ServerInfo(name=settings.server_name, version=settings.server_version),
        protocol_version=settings.protocol_version,
    )
    chunker = StreamChunker(dispatcher, delay_seconds=settings.stream_chunk_delay_seconds)

    return RuntimeComponents(
        tool_registry=tool_registry,
        dispatcher=dispatcher,
        chunker=chunker,
    )
