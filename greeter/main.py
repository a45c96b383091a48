from __future__ import annotations

from fastapi import APIRouter, FastAPI

from .routes import build_router
from .version import BuildInfo


def create_app(router: APIRouter) -> FastAPI:
    app = FastAPI(
        title="Greeter",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    # Mounted as-is; include_router would copy the routes with a method list
    app.router.routes.extend(router.routes)
    return app


def build_app() -> FastAPI:
    """App factory for ``uvicorn --factory greeter.main:build_app``.

    Reads build info from the environment when called, not on import.
    """
    return create_app(build_router(BuildInfo.from_environ()))
