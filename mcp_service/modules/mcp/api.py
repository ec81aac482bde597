from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse

from libs.common.logging import get_logger
from mcp_service.app.mcp_protocol import parse_request
from mcp_service.app.streaming import StreamFrame
from mcp_service.modules.common.deps import get_chunker, get_dispatcher

router = APIRouter()
logger = get_logger("mcp_service.modules.mcp")

_STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


@router.post("/mcp")
async def handle_mcp(request: Request) -> JSONResponse:
    # 본문 해석 실패는 RequestParseError로 올라가 500 응답이 돼요.
    mcp_request = parse_request(await request.body())
    response = await get_dispatcher(request).handle(mcp_request)
    return JSONResponse(content=response.to_dict())


@router.post("/mcp/stream")
async def handle_mcp_stream(request: Request) -> StreamingResponse:
    chunker = get_chunker(request)
    body = await request.body()
    return StreamingResponse(
        _encode_frames(chunker.stream(body)),
        media_type="text/event-stream",
        headers=_STREAM_HEADERS,
    )


async def _encode_frames(frames: AsyncIterator[StreamFrame]) -> AsyncIterator[str]:
    async for frame in frames:
        yield frame.encode()
