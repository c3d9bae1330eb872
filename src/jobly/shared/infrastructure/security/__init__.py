"""Authentication and authorization."""

from .authentication import CurrentUser, JWTManager
from .dependencies import (
    get_current_user,
    ensure_logged_in,
    ensure_admin,
)

__all__ = [
    "CurrentUser",
    "JWTManager",
    "get_current_user",
    "ensure_logged_in",
    "ensure_admin",
]
