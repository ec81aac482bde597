from __future__ import annotations

from mcp_service.bootstrap.container import RuntimeComponents, build_runtime_components

__all__ = [
    "RuntimeComponents",
    "build_runtime_components",
]
