from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import ORJSONResponse, PlainTextResponse
from prometheus_client import CollectorRegistry, start_http_server
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from search_proxy.api.router import api_router
from search_proxy.core.config import Settings, get_settings
from search_proxy.core.logging import configure_logging
from search_proxy.services.playground import PlaygroundSearch, build_upstream_client

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app(settings: Settings | None = None, http_client: httpx.AsyncClient | None = None) -> FastAPI:
    if settings is None:
        settings = get_settings()
    registry = CollectorRegistry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        missing = settings.missing_settings()
        if missing:
            logger.warning("Missing environment variables: %s", ", ".join(missing))

        client = http_client or build_upstream_client(settings)
        app.state.playground_search = PlaygroundSearch(client, settings.upstream_search_url)

        metrics_server = None
        if settings.metrics_port:
            metrics_server, _ = start_http_server(settings.metrics_port, addr=settings.app_host, registry=registry)
            logger.info("Metrics exposed on port %s", settings.metrics_port)

        logger.info("HTTP webserver running. Access it at: http://%s:%s/", settings.app_host, settings.app_port)
        try:
            yield
        finally:
            if metrics_server is not None:
                metrics_server.shutdown()
                metrics_server.server_close()
            if http_client is None:
                await client.aclose()

    app = FastAPI(
        title=settings.app_name,
        default_response_class=ORJSONResponse,
        version="0.1.0",
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        redirect_slashes=False,
    )
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.include_router(api_router)

    Instrumentator(registry=registry).instrument(app)
    app.state.metrics_registry = registry
    return app


configure_logging()

app = create_app()
