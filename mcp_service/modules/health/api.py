from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from mcp_service.app.tools.get_time import format_utc_instant
from mcp_service.modules.common.deps import get_dispatcher, get_settings

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    app_settings = get_settings(request)
    return {
        "status": "healthy",
        "server": app_settings.server_name,
        "version": app_settings.server_version,
        "timestamp": format_utc_instant(datetime.now(timezone.utc)),
    }


@router.get("/capabilities")
async def capabilities(request: Request) -> dict[str, Any]:
    dispatcher = get_dispatcher(request)
    return {
        "protocolVersion": dispatcher.protocol_version,
        "capabilities": dispatcher.capabilities(),
    }


@router.get("/", response_class=PlainTextResponse)
async def greeting(name: str = "world") -> str:
    # 예전 HTTP 트리거 응답과의 호환용이에요.
    return f"Hello, {name}! This is now an MCP Server. Try POST /mcp with MCP requests."
