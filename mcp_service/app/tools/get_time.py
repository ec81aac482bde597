"""현재 시각을 알려주는 도구예요."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from mcp_service.app.mcp_protocol import ToolCallResult
from mcp_service.app.tools.base import BaseTool

_DEFAULT_TIMEZONE = "UTC"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_utc_instant(instant: datetime) -> str:
    """UTC 기준 ISO-8601 문자열을 밀리초 정밀도와 `Z` 접미사로 만들어요."""
    utc = instant.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class GetTimeTool(BaseTool):
    """현재 시각을 UTC ISO-8601 문자열로 돌려줘요.

    `timezone` 인자는 응답 문구의 라벨로만 쓰이고 시각 자체는 변환하지 않아요.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    @property
    def name(self) -> str:
        return "get_time"

    @property
    def description(self) -> str:
        return "Get the current date and time"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "timezone": {
                    "type": "string",
                    "description": "Timezone (optional)",
                    "default": _DEFAULT_TIMEZONE,
                },
            },
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolCallResult:
        label = arguments.get("timezone") or _DEFAULT_TIMEZONE
        now = format_utc_instant(self._clock())
        return ToolCallResult.text(f"Current time ({label}): {now}")
