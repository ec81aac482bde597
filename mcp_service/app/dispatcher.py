"""MCP 메서드 이름을 핸들러로 연결하는 디스패처예요.

요청 사이에 상태를 두지 않아요. 메서드 이름 하나가 여섯 갈래 중 하나를 골라요.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from libs.common.logging import get_logger
from mcp_service.app.mcp_protocol import (
    MCP_PROTOCOL_VERSION,
    EmptyResult,
    InitializeResult,
    InvalidParamsError,
    McpPrompt,
    McpRequest,
    McpResource,
    McpResult,
    PromptListResult,
    ProtocolError,
    ResourceListResult,
    ServerInfo,
    ToolCallResult,
    ToolListResult,
    UnknownMethodError,
    protocol_error_from_exception,
)
from mcp_service.app.tools.invoker import ToolInvoker
from mcp_service.app.tools.registry import ToolRegistry

logger = get_logger("mcp_service.dispatcher")

DEFAULT_SERVER_INFO = ServerInfo(name="Azure Functions MCP Server", version="1.0.0")


def default_capabilities() -> dict[str, Any]:
    return {
        "tools": {"listChanged": True},
        "resources": {"subscribe": True, "listChanged": True},
        "prompts": {"listChanged": True},
        "logging": {},
    }


_Handler = Callable[[dict[str, Any]], Awaitable[McpResult]]


class McpDispatcher:
    """MCP 요청을 처리해 결과나 프로토콜 오류를 돌려줘요.

    사용법::

        dispatcher = McpDispatcher(registry=registry, invoker=ToolInvoker(registry))
        response = await dispatcher.handle(McpRequest(method="tools/list"))
        payload = response.to_dict()
    """

    def __init__(
        self,
        *,
        registry: ToolRegistry,
        invoker: ToolInvoker,
        server_info: ServerInfo = DEFAULT_SERVER_INFO,
        protocol_version: str = MCP_PROTOCOL_VERSION,
        resources: Sequence[McpResource] = (),
        prompts: Sequence[McpPrompt] = (),
    ) -> None:
        self._registry = registry
        self._invoker = invoker
        self._server_info = server_info
        self._protocol_version = protocol_version
        self._resources = list(resources)
        self._prompts = list(prompts)
        self._handlers: dict[str, _Handler] = {
            "initialize": self._handle_initialize,
            "tools/list": self._handle_list_tools,
            "tools/call": self._handle_call_tool,
            "resources/list": self._handle_list_resources,
            "prompts/list": self._handle_list_prompts,
            "ping": self._handle_ping,
        }

    @property
    def protocol_version(self) -> str:
        return self._protocol_version

    @property
    def server_info(self) -> ServerInfo:
        return self._server_info

    def capabilities(self) -> dict[str, Any]:
        return default_capabilities()

    def supported_methods(self) -> list[str]:
        return list(self._handlers)

    async def handle(self, request: McpRequest) -> McpResult | ProtocolError:
        """요청을 처리해요. 하위 핸들러에서 발생한 예외는 모두 프로토콜 오류로 바꿔요."""
        logger.info("mcp_request", method=request.method)
        try:
            return await self.dispatch(request)
        except Exception as exc:
            error = protocol_error_from_exception(exc)
            logger.warning(
                "mcp_request_failed",
                method=request.method,
                error_type=exc.__class__.__name__,
                code=error.code,
                error=error.message,
            )
            return error

    async def dispatch(self, request: McpRequest) -> McpResult:
        """예외를 변환하지 않고 그대로 올리는 버전이에요.

        Raises:
            UnknownMethodError: 지원하지 않는 메서드면 발생해요.
        """
        handler = self._handlers.get(request.method)
        if handler is None:
            raise UnknownMethodError(request.method)
        return await handler(request.params or {})

    async def _handle_initialize(self, params: dict[str, Any]) -> InitializeResult:
        # 클라이언트가 보낸 params는 검증하지도 쓰지도 않아요.
        del params
        return InitializeResult(
            protocol_version=self._protocol_version,
            capabilities=self.capabilities(),
            server_info=self._server_info,
        )

    async def _handle_list_tools(self, params: dict[str, Any]) -> ToolListResult:
        del params
        return ToolListResult(tools=self._registry.list())

    async def _handle_call_tool(self, params: dict[str, Any]) -> ToolCallResult:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidParamsError("Missing required parameter: name")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise InvalidParamsError("Tool arguments must be an object")
        return await self._invoker.invoke(name, arguments)

    async def _handle_list_resources(self, params: dict[str, Any]) -> ResourceListResult:
        del params
        return ResourceListResult(resources=list(self._resources))

    async def _handle_list_prompts(self, params: dict[str, Any]) -> PromptListResult:
        del params
        return PromptListResult(prompts=list(self._prompts))

    async def _handle_ping(self, params: dict[str, Any]) -> EmptyResult:
        del params
        return EmptyResult()
