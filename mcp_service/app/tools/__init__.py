from mcp_service.app.tools.base import BaseTool
from mcp_service.app.tools.invoker import ToolInvoker
from mcp_service.app.tools.registry import ToolRegistry

__all__ = [
    "BaseTool",
    "ToolInvoker",
    "ToolRegistry",
]
