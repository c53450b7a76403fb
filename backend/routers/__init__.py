"""Routers module - FastAPI route handlers"""

from . import text, config

__all__ = ["text", "config"]
