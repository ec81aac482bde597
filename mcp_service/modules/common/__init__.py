from __future__ import annotations

from mcp_service.modules.common.deps import (
    get_chunker,
    get_dispatcher,
    get_settings,
)

__all__ = [
    "get_chunker",
    "get_dispatcher",
    "get_settings",
]
