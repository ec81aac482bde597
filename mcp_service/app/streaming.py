"""디스패처 결과를 SSE 프레임 시퀀스로 바꾸는 스트림 청커예요.

`tools/call` 결과의 텍스트는 다섯 조각 안팎으로 나눠 `partial` 프레임으로 보내고,
나머지 결과는 프레임 하나로 보내요. 어떤 경우든 마지막 프레임은 `[DONE]`이에요.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

from libs.common.logging import get_logger
from mcp_service.app.dispatcher import McpDispatcher
from mcp_service.app.mcp_protocol import (
    McpResult,
    ProtocolError,
    TextContent,
    ToolCallResult,
    parse_request,
    protocol_error_from_exception,
)

logger = get_logger("mcp_service.streaming")

DONE_SENTINEL = "[DONE]"
CHUNK_PIECES = 5
DEFAULT_CHUNK_DELAY_SECONDS = 0.1


@dataclass(frozen=True, slots=True)
class StreamFrame:
    """스트림 이벤트 하나예요. `payload`가 없으면 종료 표식이에요."""

    payload: dict[str, Any] | None
    partial: bool = False

    @property
    def is_done(self) -> bool:
        return self.payload is None

    def encode(self) -> str:
        """`data: ...` 형식의 SSE 이벤트 문자열로 직렬화해요."""
        if self.payload is None:
            return f"data: {DONE_SENTINEL}\n\n"
        return f"data: {json.dumps(self.payload, ensure_ascii=False)}\n\n"


DONE_FRAME = StreamFrame(payload=None)


def split_text(text: str, pieces: int = CHUNK_PIECES) -> Iterator[tuple[str, bool]]:
    """텍스트를 `(조각, partial)` 쌍으로 나눠요.

    조각 크기는 `max(1, len(text) // pieces)`로 고정이라 나머지가 있으면
    조각이 `pieces`보다 하나 더 나올 수 있어요.
    """
    size = max(1, len(text) // pieces)
    for offset in range(0, len(text), size):
        yield text[offset : offset + size], offset + size < len(text)


def _first_text(result: McpResult | ProtocolError) -> str | None:
    if not isinstance(result, ToolCallResult) or not result.content:
        return None
    block = result.content[0]
    if isinstance(block, TextContent) and block.text:
        return block.text
    return None


class StreamChunker:
    """결과 하나를 프레임 시퀀스로 바꿔요. 호출할 때마다 새 시퀀스를 만들어요.

    사용법::

        chunker = StreamChunker(dispatcher, delay_seconds=0.1)
        async for frame in chunker.stream(raw_body):
            yield frame.encode()
    """

    def __init__(
        self,
        dispatcher: McpDispatcher,
        *,
        delay_seconds: float = DEFAULT_CHUNK_DELAY_SECONDS,
        pieces: int = CHUNK_PIECES,
    ) -> None:
        self._dispatcher = dispatcher
        self._delay_seconds = max(0.0, delay_seconds)
        self._pieces = pieces

    def content_frames(self, method: str, result: McpResult | ProtocolError) -> Iterator[StreamFrame]:
        """종료 표식과 지연 없이 내용 프레임만 만들어요."""
        text = _first_text(result) if method == "tools/call" else None
        if text is None:
            yield StreamFrame(payload=result.to_dict())
            return
        for piece, partial in split_text(text, self._pieces):
            yield StreamFrame(
                payload={"content": [TextContent(text=piece).to_dict()], "partial": partial},
                partial=partial,
            )

    async def chunk(self, method: str, result: McpResult | ProtocolError) -> AsyncIterator[StreamFrame]:
        """내용 프레임 사이에 지연을 두며 내보내고 마지막에 `[DONE]`을 붙여요."""
        for index, frame in enumerate(self.content_frames(method, result)):
            if index > 0:
                await asyncio.sleep(self._delay_seconds)
            yield frame
        yield DONE_FRAME

    async def stream(self, raw_body: bytes | str) -> AsyncIterator[StreamFrame]:
        """원본 본문을 해석하고 처리해 프레임을 내보내요.

        해석이나 처리 중 예외가 나면 오류 프레임 하나와 `[DONE]`만 내보내요.
        """
        try:
            request = parse_request(raw_body)
            logger.info("mcp_stream_started", method=request.method)
            result = await self._dispatcher.handle(request)
        except Exception as exc:
            error = protocol_error_from_exception(exc)
            logger.warning("mcp_stream_failed", error_type=exc.__class__.__name__, error=error.message)
            yield StreamFrame(payload=error.to_dict())
            yield DONE_FRAME
            return

        async for frame in self.chunk(request.method, result):
            yield frame
