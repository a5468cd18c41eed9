"""Responder application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from libs.core.application.route_table import RouteTable, build_route_table
from services.responder.config import Settings, get_settings
from services.responder.presentation.http.routes import build_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    route_table: RouteTable | None = None,
) -> FastAPI:
    """Build the application around a fixed route table."""
    settings = settings or get_settings()
    if route_table is None:
        route_table = build_route_table(settings.service_info())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        for route in route_table:
            logger.debug("GET %s - %s", route.path, route.summary)
        yield
        logger.info("Server shutting down")

    # Only the table's paths are served: no docs pages, and "/health/" is not
    # an alias of "/health".
    app = FastAPI(
        title="HTTP Responder",
        version=settings.service_version,
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    # Any origin may read any response.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(build_router(route_table))
    app.state.route_table = route_table

    return app


app = create_app()
