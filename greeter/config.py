from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Raised when an environment setting cannot be used."""


def parse_port(value: Optional[str]) -> int:
    """Parse a ``PORT`` value. Unset or empty means the default port."""
    if not value:
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"invalid port {value!r}") from None
    if not 1 <= port <= 65535:
        raise ConfigError(f"port {port} out of range")
    return port


def parse_log_level(value: Optional[str]) -> str:
    level = (value or DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"unknown log level {value!r}")
    return level


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            port=parse_port(env.get("PORT")),
            log_level=parse_log_level(env.get("LOG_LEVEL")),
        )
