"""Admin session token issue / verify utilities"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any
import jwt

from portal.config.settings import get_settings

ADMIN_SCOPE = "admin"


def _build_payload(subject: str, expires_minutes: int, scopes: list[str] | None = None) -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    return {
        "sub": subject,
        "scopes": scopes or [],
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }


def create_access_token(subject: str, scopes: list[str] | None = None, expires_minutes: int | None = None) -> str:
    security = get_settings().security
    minutes = expires_minutes or security.access_token_expire_minutes
    return jwt.encode(_build_payload(subject, minutes, scopes), security.jwt_secret, algorithm=security.jwt_algorithm)


def decode_token(token: str) -> Dict[str, Any] | None:
    security = get_settings().security
    try:
        return jwt.decode(token, security.jwt_secret, algorithms=[security.jwt_algorithm])
    except jwt.PyJWTError:
        return None
