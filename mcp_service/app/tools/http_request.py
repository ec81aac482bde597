"""외부 API로 HTTP 요청을 보내는 도구예요."""

from __future__ import annotations

from typing import Any

import httpx

from libs.common.logging import get_logger
from mcp_service.app.mcp_protocol import ToolCallResult
from mcp_service.app.tools.base import BaseTool

logger = get_logger("mcp_service.tools.http_request")

_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]


class HttpRequestTool(BaseTool):
    """URL로 HTTP 요청을 보내고 상태 코드와 본문을 텍스트로 돌려줘요.

    전송 실패는 예외로 올리지 않고 `isError` 결과로 돌려줘요.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        # 테스트에서 httpx.MockTransport를 꽂을 수 있어요.
        self._transport = transport

    @property
    def name(self) -> str:
        return "http_request"

    @property
    def description(self) -> str:
        return "Make HTTP requests to external APIs"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "URL to make request to",
                },
                "method": {
                    "type": "string",
                    "enum": list(_ALLOWED_METHODS),
                    "default": "GET",
                },
                "headers": {
                    "type": "object",
                    "description": "HTTP headers",
                },
                "body": {
                    "type": "string",
                    "description": "Request body for POST/PUT",
                },
            },
            "required": ["url"],
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolCallResult:
        url = arguments.get("url")
        if not isinstance(url, str) or not url.strip():
            return _failure("Missing required parameter: url")

        method = arguments.get("method") or "GET"
        if not isinstance(method, str):
            method = "GET"

        headers = arguments.get("headers")
        if not isinstance(headers, dict):
            headers = {}

        body = arguments.get("body")
        content = body if isinstance(body, str) and body else None

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                follow_redirects=True,
                max_redirects=5,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method.upper(),
                    url.strip(),
                    headers={str(key): str(value) for key, value in headers.items() if value is not None},
                    content=content,
                )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # ValueError는 ASCII로 인코딩할 수 없는 헤더 값 등에서 발생해요.
            logger.warning("http_request_tool_failed", url=url, method=method, error=_describe(exc))
            return _failure(_describe(exc))

        return ToolCallResult.text(f"HTTP {response.status_code}: {response.text}")


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def _failure(message: str) -> ToolCallResult:
    return ToolCallResult.text(f"HTTP Request failed: {message}", is_error=True)
