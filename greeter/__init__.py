"""Minimal greeting service with liveness, readiness and version endpoints."""

from .version import VERSION

__version__ = VERSION
