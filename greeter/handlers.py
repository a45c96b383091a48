"""Request handlers.

Each handler is a pure function of the build info; none of them looks at
the request.
"""
from fastapi import Response
from fastapi.responses import PlainTextResponse

from .version import BuildInfo, get_version_info


def root(build: BuildInfo) -> Response:
    return PlainTextResponse(f"Hello, World! (version: {build.version})\n")


def health(build: BuildInfo) -> Response:
    return PlainTextResponse("OK\n")


def readiness(build: BuildInfo) -> Response:
    # Same as health: there are no dependencies to wait on.
    return PlainTextResponse("Ready\n")


def version(build: BuildInfo) -> Response:
    info = get_version_info(build)
    body = info.model_dump_json(by_alias=True) + "\n"
    return Response(content=body, media_type="application/json")
