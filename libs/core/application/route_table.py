"""Static route table for the responder service."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict
from typing import Any

from libs.core.domain.entities import ApiResponse, Route, ServiceInfo

WELCOME_RESPONSE = ApiResponse(
    message="Hello from Rust Docker container!",
    status="success",
)
HEALTH_RESPONSE = ApiResponse(message="Service is healthy", status="ok")

DEFAULT_SERVICE_INFO = ServiceInfo(
    service="rust-project",
    version="0.1.0",
    description="Rust web service running in Docker",
    author="Your Name",
    port=8001,
)


class RouteTable:
    """Ordered, read-only collection of routes. First match wins."""

    def __init__(self, routes: tuple[Route, ...]) -> None:
        self._routes = routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(route.path for route in self._routes)

    def resolve(self, path: str) -> Route | None:
        for route in self._routes:
            if route.path == path:
                return route
        return None


def welcome() -> dict[str, Any]:
    return asdict(WELCOME_RESPONSE)


def health() -> dict[str, Any]:
    return asdict(HEALTH_RESPONSE)


def build_route_table(info: ServiceInfo = DEFAULT_SERVICE_INFO) -> RouteTable:
    """Build the fixed table of three routes.

    The info payload is captured once here, so every call of the info handler
    returns an equal dict.
    """
    info_payload = asdict(info)

    def service_info() -> dict[str, Any]:
        return dict(info_payload)

    return RouteTable(
        (
            Route(path="/", handler=welcome, name="welcome", summary="Welcome message"),
            Route(path="/health", handler=health, name="health", summary="Health check"),
            Route(
                path="/api/info",
                handler=service_info,
                name="service_info",
                summary="Service information",
            ),
        )
    )
