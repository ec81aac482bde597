"""MCP 요청/응답 데이터 모델과 오류 코드 매핑을 모아요.

결과 타입은 모두 `to_dict()`로 와이어 형식(camelCase JSON 객체)을 만들어요.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from libs.common.errors import InternalError, NotFoundError, ValidationError

MCP_PROTOCOL_VERSION = "2024-11-05"

# JSON-RPC 표준 오류 코드예요. 현재는 모든 실패를 INTERNAL_ERROR 하나로 묶어요.
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class McpRequest(BaseModel):
    """전송 계층이 본문을 해석해 만든 MCP 요청이에요. `jsonrpc`, `id` 같은 추가 필드는 무시해요."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    method: str
    params: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass(frozen=True, slots=True)
class TextContent:
    """텍스트 콘텐츠 블록이에요. 이미지 같은 다른 블록은 `type`만 다른 새 클래스로 추가해요."""

    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


ContentBlock = TextContent


@dataclass(frozen=True, slots=True)
class McpPromptArgument:
    name: str
    description: str | None
    required: bool

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "required": self.required}
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True, slots=True)
class McpPrompt:
    name: str
    description: str | None
    arguments: tuple[McpPromptArgument, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "arguments": [argument.to_dict() for argument in self.arguments],
        }
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True, slots=True)
class McpResource:
    uri: str
    name: str
    description: str | None
    mime_type: str | None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"uri": self.uri, "name": self.name}
        if self.description is not None:
            data["description"] = self.description
        if self.mime_type is not None:
            data["mimeType"] = self.mime_type
        return data


@dataclass(frozen=True, slots=True)
class ServerInfo:
    name: str
    version: str


@dataclass(frozen=True, slots=True)
class InitializeResult:
    protocol_version: str
    capabilities: dict[str, Any]
    server_info: ServerInfo

    def to_dict(self) -> dict[str, Any]:
        return {
            "protocolVersion": self.protocol_version,
            "capabilities": self.capabilities,
            "serverInfo": {"name": self.server_info.name, "version": self.server_info.version},
        }


@dataclass(frozen=True, slots=True)
class ToolListResult:
    tools: list[ToolSpec]

    def to_dict(self) -> dict[str, Any]:
        return {"tools": [tool.to_dict() for tool in self.tools]}


@dataclass(frozen=True, slots=True)
class ToolCallResult:
    content: list[ContentBlock]
    is_error: bool = False

    @classmethod
    def text(cls, text: str, *, is_error: bool = False) -> ToolCallResult:
        return cls(content=[TextContent(text=text)], is_error=is_error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [block.to_dict() for block in self.content],
            "isError": self.is_error,
        }


@dataclass(frozen=True, slots=True)
class ResourceListResult:
    resources: list[McpResource] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"resources": [resource.to_dict() for resource in self.resources]}


@dataclass(frozen=True, slots=True)
class PromptListResult:
    prompts: list[McpPrompt] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"prompts": [prompt.to_dict() for prompt in self.prompts]}


@dataclass(frozen=True, slots=True)
class EmptyResult:
    def to_dict(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True, slots=True)
class ProtocolError:
    code: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


McpResult = Union[
    InitializeResult,
    ToolListResult,
    ToolCallResult,
    ResourceListResult,
    PromptListResult,
    EmptyResult,
]


class UnknownMethodError(NotFoundError):
    def __init__(self, method: str) -> None:
        super().__init__(f"Unknown method: {method}")
        self.method = method


class UnknownToolError(NotFoundError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidParamsError(ValidationError):
    pass


class RequestParseError(InternalError):
    """본문이 MCP 요청 형태가 아니어서 프로토콜 오류를 붙일 요청조차 없어요."""


def parse_request(raw: bytes | str) -> McpRequest:
    """전송 계층이 받은 본문을 `McpRequest`로 해석해요.

    Raises:
        RequestParseError: JSON이 아니거나 `method`가 없으면 발생해요.
    """
    try:
        return McpRequest.model_validate_json(raw)
    except PydanticValidationError as exc:
        errors = exc.errors()
        detail = errors[0]["msg"] if errors else str(exc)
        raise RequestParseError(f"Invalid MCP request: {detail}") from exc


def protocol_error_from_exception(exc: Exception) -> ProtocolError:
    """예외를 프로토콜 오류로 바꿔요.

    오류 종류별로 다른 코드를 주려면 이 함수만 고치면 돼요.
    지금은 원래 메시지를 살린 채 모두 INTERNAL_ERROR로 보내요.
    """
    message = getattr(exc, "message", None)
    if not isinstance(message, str):
        message = str(exc)
    return ProtocolError(code=INTERNAL_ERROR, message=message)
