"""HTTP API."""

from .router import create_api_router
from .error_handlers import register_error_handlers

__all__ = ["create_api_router", "register_error_handlers"]
