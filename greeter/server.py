"""Process entry point: configure logging, bind the listener, serve forever."""
from __future__ import annotations

import logging
import socket
import sys
from typing import Mapping, Optional

import uvicorn
from fastapi import FastAPI

from .config import ConfigError, Settings
from .main import create_app
from .routes import build_router
from .version import BuildInfo

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def bind_socket(settings: Settings) -> socket.socket:
    """Bind the listening socket, exiting the process if that fails."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((settings.host, settings.port))
    except OSError as exc:
        sock.close()
        logger.critical("Server failed: %s", exc)
        sys.exit(1)
    return sock


def serve(app: FastAPI, settings: Settings, build: BuildInfo) -> None:
    sock = bind_socket(settings)
    port = sock.getsockname()[1]
    logger.info("Starting server on :%d (version: %s)", port, build.version)
    config = uvicorn.Config(
        app,
        log_config=None,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    uvicorn.Server(config).run(sockets=[sock])


def run(environ: Optional[Mapping[str, str]] = None) -> None:
    try:
        settings = Settings.from_environ(environ)
    except ConfigError as exc:
        configure_logging("INFO")
        logger.critical("Server failed: %s", exc)
        sys.exit(1)

    configure_logging(settings.log_level)
    build = BuildInfo.from_environ(environ)
    serve(create_app(build_router(build)), settings, build)


if __name__ == "__main__":
    run()
