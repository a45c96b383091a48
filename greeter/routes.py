from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Request, Response
from starlette.routing import Route

from . import handlers
from .version import BuildInfo

Handler = Callable[[BuildInfo], Response]

ROUTES: dict[str, Handler] = {
    "/": handlers.root,
    "/health": handlers.health,
    "/readiness": handlers.readiness,
    "/version": handlers.version,
}


def _bind(handler: Handler, build: BuildInfo) -> Callable[[Request], Response]:
    def endpoint(request: Request) -> Response:
        return handler(build)

    endpoint.__name__ = handler.__name__
    return endpoint


def build_router(build: BuildInfo) -> APIRouter:
    """Build the routing table: exact paths, any method.

    Plain starlette routes with ``methods=None`` so no method is ever
    answered with 405.
    """
    router = APIRouter(redirect_slashes=False)
    for path, handler in ROUTES.items():
        router.routes.append(
            Route(path, _bind(handler, build), methods=None, include_in_schema=False)
        )
    return router
