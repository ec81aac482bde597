from __future__ import annotations

from fastapi import HTTPException, Request, status

from mcp_service.app.dispatcher import McpDispatcher
from mcp_service.app.settings import Settings, settings
from mcp_service.app.streaming import StreamChunker


def get_settings(request: Request) -> Settings:
    configured = getattr(request.app.state, "settings", None)
    if isinstance(configured, Settings):
        return configured
    return settings


def get_dispatcher(request: Request) -> McpDispatcher:
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if not isinstance(dispatcher, McpDispatcher):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="MCP 디스패처가 준비되지 않았어요.")
    return dispatcher


def get_chunker(request: Request) -> StreamChunker:
    chunker = getattr(request.app.state, "chunker", None)
    if not isinstance(chunker, StreamChunker):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="스트림 청커가 준비되지 않았어요.")
    return chunker
