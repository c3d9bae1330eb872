"""Logging and request monitoring infrastructure."""

from .logging import setup_structured_logging, request_id_var, user_id_var
from .middleware import RequestContextMiddleware

__all__ = [
    "setup_structured_logging",
    "request_id_var",
    "user_id_var",
    "RequestContextMiddleware",
]
