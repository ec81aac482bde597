from __future__ import annotations

from fastapi import APIRouter


def build_api_router() -> APIRouter:
    from mcp_service.modules.health.api import router as health_router
    from mcp_service.modules.mcp.api import router as mcp_router

    api_router = APIRouter()
    api_router.include_router(mcp_router)
    api_router.include_router(health_router)
    return api_router


__all__ = ["build_api_router"]
