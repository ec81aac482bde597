from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MCP_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    service_name: str = "mcp-service"
    host: str = "0.0.0.0"
    port: int = 7071
    log_level: str = "INFO"
    server_name: str = "Azure Functions MCP Server"
    server_version: str = "1.0.0"
    protocol_version: str = "2024-11-05"
    stream_chunk_delay_seconds: float = 0.1
    http_request_timeout_seconds: float = 30.0
    # CSV 문자열 또는 리스트 모두 허용해요
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: object) -> list[str]:
        """환경변수에서 CSV 문자열로 들어온 경우 리스트로 변환해요."""
        if isinstance(value, str):
            parts = [p.strip() for p in value.split(",") if p.strip()]
            return parts if parts else ["*"]
        return value  # type: ignore[return-value]

    @model_validator(mode="after")
    def _check_stream_delay(self) -> "Settings":
        """음수 지연은 0으로 취급한다는 사실을 경고로 남겨요."""
        import logging
        _log = logging.getLogger("mcp_service.settings")
        if self.stream_chunk_delay_seconds < 0:
            _log.warning("MCP_STREAM_CHUNK_DELAY_SECONDS가 음수예요. 프레임 사이 지연 없이 보내요.")
        return self


settings = Settings()
