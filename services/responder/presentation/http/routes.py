import logging
from collections.abc import Callable

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response

from libs.core.application.route_table import RouteTable
from libs.core.domain.entities import Route

logger = logging.getLogger(__name__)


def build_router(route_table: RouteTable) -> APIRouter:
    """Register every route of the table as a GET endpoint."""
    router = APIRouter()
    for route in route_table:
        router.add_api_route(
            route.path,
            _json_endpoint(route),
            methods=["GET"],
            name=route.name,
            summary=route.summary or None,
        )
    return router


def _json_endpoint(route: Route) -> Callable[[], Response]:
    # Failures are answered here so the response still passes through CORS.
    def endpoint() -> Response:
        try:
            return JSONResponse(content=route.handler())
        except Exception:
            logger.exception(
                "Unhandled exception on %s",
                route.path,
                extra={"path": route.path},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal Server Error"},
            )

    endpoint.__name__ = route.name
    return endpoint
