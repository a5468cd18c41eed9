from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ApiResponse:
    """Message/status payload returned by the welcome and health routes."""

    message: str
    status: str


@dataclass(frozen=True)
class ServiceInfo:
    """Service metadata returned by the info route."""

    service: str
    version: str
    description: str
    author: str
    port: int


@dataclass(frozen=True)
class Route:
    """Single entry of the static dispatch table."""

    path: str
    handler: Callable[[], dict[str, Any]]
    name: str
    summary: str = ""
