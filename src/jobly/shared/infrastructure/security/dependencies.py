"""
Security dependencies for FastAPI endpoints.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import structlog

from jobly.shared.application.exceptions import ForbiddenException, UnauthorizedException
from jobly.shared.infrastructure.monitoring.logging import user_id_var
from .authentication import CurrentUser, JWTManager

logger = structlog.get_logger(__name__)

# auto_error is off so a missing header is reported as 401 by our own handlers
security = HTTPBearer(auto_error=False)


def get_jwt_manager(request: Request) -> JWTManager:
    """Get the JWT manager held by the application container."""
    return request.app.state.container.jwt_manager


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    jwt_manager: JWTManager = Depends(get_jwt_manager),
) -> CurrentUser:
    """Get current authenticated user."""
    if credentials is None:
        raise UnauthorizedException("Authentication required")

    user = jwt_manager.authenticate(credentials.credentials)
    user_id_var.set(user.username)
    return user


# Alias matching the route-level guard names
ensure_logged_in = get_current_user


async def ensure_admin(current_user: CurrentUser = Depends(ensure_logged_in)) -> CurrentUser:
    """Require an authenticated caller holding the admin privilege."""
    if not current_user.is_admin:
        logger.warning("Admin privilege required", username=current_user.username)
        raise ForbiddenException("Admin privilege required")
    return current_user
