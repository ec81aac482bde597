"""이름으로 도구를 찾아 실행하는 호출기예요."""

from __future__ import annotations

from typing import Any

from libs.common.logging import get_logger
from mcp_service.app.mcp_protocol import ToolCallResult, UnknownToolError
from mcp_service.app.tools.registry import ToolRegistry

logger = get_logger("mcp_service.tools.invoker")


class ToolInvoker:
    """레지스트리에 등록된 도구만 실행해요.

    사용법::

        invoker = ToolInvoker(registry)
        result = await invoker.invoke("echo", {"text": "hi"})
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    async def invoke(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """도구를 실행해요.

        Raises:
            UnknownToolError: 등록되지 않은 이름이면 발생해요.
        """
        tool = self._registry.get(name)
        if tool is None:
            raise UnknownToolError(name)
        logger.info("tool_called", tool=name, argument_keys=sorted(arguments))
        return await tool.execute(arguments)
