from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(slots=True)
class ErrorEnvelope:
    error_code: str
    message: str
    trace_id: str
    retryable: bool


class DomainError(Exception):
    status_code = 400

    def __init__(self, error_code: str, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.retryable = retryable


class ValidationError(DomainError):
    def __init__(self, message: str = "검증에 실패했어요.") -> None:
        super().__init__("VALIDATION_FAILED", message, retryable=False)


class NotFoundError(DomainError):
    def __init__(self, message: str = "대상을 찾지 못했어요.") -> None:
        super().__init__("NOT_FOUND", message, retryable=False)


class InternalError(DomainError):
    """요청 자체를 해석하지 못해 프로토콜 응답을 만들 수 없을 때 쓰는 오류예요."""

    status_code = 500

    def __init__(self, message: str = "예상하지 못한 내부 오류가 발생했어요.") -> None:
        super().__init__("INTERNAL_ERROR", message, retryable=False)


def build_error_envelope(error_code: str, message: str, retryable: bool) -> ErrorEnvelope:
    return ErrorEnvelope(
        error_code=error_code,
        message=message,
        trace_id=str(uuid.uuid4()),
        retryable=retryable,
    )
