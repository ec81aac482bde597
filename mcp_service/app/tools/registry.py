"""도구를 등록하고 조회하는 레지스트리예요."""

from __future__ import annotations

from mcp_service.app.mcp_protocol import ToolSpec
from mcp_service.app.tools.base import BaseTool


class ToolRegistry:
    """도구를 이름으로 관리하는 중앙 레지스트리예요.

    서버 기동 시 한 번 채우고 요청 처리 중에는 읽기만 해요.
    등록 순서가 곧 `tools/list` 응답 순서예요.

    사용법::

        registry = ToolRegistry()
        registry.register(EchoTool())

        spec = registry.lookup("echo")
        specs = registry.list()
    """

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """도구를 레지스트리에 등록해요. 같은 이름이면 덮어씌우고 기존 순서를 유지해요."""
        self._tools[tool.name] = tool

    def lookup(self, name: str) -> ToolSpec | None:
        """이름으로 도구 스펙을 조회해요."""
        tool = self._tools.get(name)
        if tool is None:
            return None
        return tool.to_spec()

    def get(self, name: str) -> BaseTool | None:
        """이름으로 도구 인스턴스를 조회해요."""
        return self._tools.get(name)

    def list(self) -> list[ToolSpec]:
        """등록된 모든 도구 스펙을 등록 순서대로 반환해요."""
        return [tool.to_spec() for tool in self._tools.values()]

    def list_names(self) -> list[str]:
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)
