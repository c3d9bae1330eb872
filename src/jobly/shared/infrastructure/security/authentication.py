"""
JWT authentication for API callers.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import JWTError, jwt
import structlog

from jobly.config.settings import Settings, get_settings
from jobly.shared.application.exceptions import UnauthorizedException


logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller extracted from a verified access token."""

    username: str
    is_admin: bool = False


class JWTManager:
    """JWT token management service."""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.secret_key = settings.security.secret_key
        self.algorithm = settings.security.jwt_algorithm
        self.access_token_expire_minutes = settings.security.access_token_expire_minutes

    def create_access_token(
        self,
        username: str,
        is_admin: bool = False,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Create JWT access token."""
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        claims = {
            "sub": username,
            "isAdmin": is_admin,
            "type": "access",
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify and decode JWT token."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning("Invalid JWT token", error=str(e))
            raise UnauthorizedException("Invalid token")

        if payload.get("type") != "access" or not payload.get("sub"):
            raise UnauthorizedException("Invalid token")

        return payload

    def authenticate(self, token: str) -> CurrentUser:
        """Resolve a bearer token into the calling user."""
        payload = self.verify_token(token)
        return CurrentUser(
            username=payload["sub"],
            is_admin=payload.get("isAdmin") is True,
        )
