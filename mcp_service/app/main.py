from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from libs.common.http_handlers import register_exception_handlers
from libs.common.logging import configure_logging, get_logger
from mcp_service.app.settings import Settings, settings
from mcp_service.bootstrap.container import build_runtime_components
from mcp_service.modules import build_api_router

logger = get_logger("mcp_service.access")


def create_app(
    app_settings: Settings | None = None,
    *,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """런타임 구성요소를 한 번 만들어 `app.state`에 얹은 FastAPI 앱을 생성해요."""
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level)

    runtime = build_runtime_components(app_settings, http_transport=http_transport)

    app = FastAPI(title=app_settings.service_name)
    app.state.settings = app_settings
    app.state.dispatcher = runtime.dispatcher
    app.state.chunker = runtime.chunker

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    app.include_router(build_api_router())
    register_exception_handlers(app, "mcp_service.errors")
    return app


app = create_app()
