from __future__ import annotations

import pytest

from mcp_service.app.settings import Settings
from mcp_service.bootstrap.container import build_runtime_components


def test_cors_origins_accept_csv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MCP_CORS_ALLOW_ORIGINS", "https://a.test, https://b.test")
    assert Settings().cors_allow_origins == ["https://a.test", "https://b.test"]


def test_cors_origins_blank_falls_back_to_wildcard() -> None:
    assert Settings(cors_allow_origins=" , ").cors_allow_origins == ["*"]


def test_runtime_components_follow_settings() -> None:
    runtime = build_runtime_components(
        Settings(server_name="test-server", server_version="9.9.9", protocol_version="2025-03-26")
    )
    assert runtime.dispatcher.protocol_version == "2025-03-26"
    assert runtime.dispatcher.server_info.name == "test-server"
    assert runtime.dispatcher.server_info.version == "9.9.9"
    assert runtime.tool_registry.list_names() == ["echo", "get_time", "http_request"]
