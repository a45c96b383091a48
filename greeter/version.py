"""Build information for the service.

The constants below are the values baked into a build. Release builds
rewrite them (or set ``BUILD_VERSION`` / ``BUILD_COMMIT`` / ``BUILD_DATE``
in the image); local checkouts report the defaults.
"""
from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from typing import Mapping, Optional

from .schemas import VersionInfo

VERSION = "dev"
COMMIT = "unknown"
BUILD_DATE = "unknown"


@dataclass(frozen=True)
class BuildInfo:
    version: str = VERSION
    commit: str = COMMIT
    build_date: str = BUILD_DATE

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> BuildInfo:
        env = os.environ if environ is None else environ
        return cls(
            version=env.get("BUILD_VERSION") or VERSION,
            commit=env.get("BUILD_COMMIT") or COMMIT,
            build_date=env.get("BUILD_DATE") or BUILD_DATE,
        )


def runtime_version() -> str:
    return f"{platform.python_implementation().lower()}{platform.python_version()}"


def platform_string() -> str:
    """Return ``<os>/<arch>``, e.g. ``linux/x86_64``."""
    return f"{platform.system().lower()}/{platform.machine().lower()}"


def get_version_info(build: BuildInfo) -> VersionInfo:
    """Get version information for the running process."""
    return VersionInfo(
        version=build.version,
        commit=build.commit,
        build_date=build.build_date,
        runtime_version=runtime_version(),
        platform=platform_string(),
    )
