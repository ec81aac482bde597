"""MCP 도구의 추상 기반 클래스예요.

새 도구를 추가하려면 `BaseTool`을 상속하고 `name`, `description`,
`input_schema`, `execute`를 구현하면 돼요.
"""

from __future__ import annotations

import abc
from typing import Any

from mcp_service.app.mcp_protocol import ToolCallResult, ToolSpec


class BaseTool(abc.ABC):
    """모든 도구가 구현해야 하는 추상 클래스예요.

    확장 방법:
        1. `BaseTool`을 상속하는 클래스를 만들어요.
        2. `name`, `description`, `input_schema` 프로퍼티를 구현해요.
        3. `execute` 메서드에 실제 로직을 작성해요.
        4. `ToolRegistry.register()`로 등록하면 끝이에요.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """도구의 고유 이름이에요. 클라이언트가 `tools/call`에서 사용해요."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """도구가 무엇을 하는지 설명하는 문장이에요."""

    @property
    @abc.abstractmethod
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema 형식의 입력 파라미터 정의예요.

        예시::

            {
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "Text to echo back"},
                },
                "required": ["text"],
            }
        """

    @abc.abstractmethod
    async def execute(self, arguments: dict[str, Any]) -> ToolCallResult:
        """도구를 실행하고 결과를 반환해요.

        스키마의 필수 값이 빠져도 예외 대신 기본값으로 처리하는 게 원칙이에요.

        Args:
            arguments: `input_schema`에 정의된 형태의 파라미터 딕셔너리예요.

        Returns:
            콘텐츠 블록이 하나 이상 담긴 `ToolCallResult`예요.
        """

    def to_spec(self) -> ToolSpec:
        """`tools/list` 응답에 실릴 도구 스펙을 생성해요."""
        return ToolSpec(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
        )
