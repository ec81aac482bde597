"""입력 텍스트를 그대로 돌려주는 테스트용 도구예요."""

from __future__ import annotations

from typing import Any

from mcp_service.app.mcp_protocol import ToolCallResult
from mcp_service.app.tools.base import BaseTool

_MISSING_TEXT = "No text provided"


class EchoTool(BaseTool):
    @property
    def name(self) -> str:
        return "echo"

    @property
    def description(self) -> str:
        return "Echo back the input text"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": "Text to echo back",
                },
            },
            "required": ["text"],
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolCallResult:
        # 필수 값이 없어도 실패하지 않고 안내 문구로 대신해요.
        text = arguments.get("text") or _MISSING_TEXT
        return ToolCallResult.text(f"Echo: {text}")
