"""Admin session endpoint for the portal dashboard."""

from fastapi import APIRouter
import logging

from portal.config.settings import get_settings
from portal.core.exceptions import AuthenticationError, ErrorCode
from portal.core.jwt import ADMIN_SCOPE, create_access_token
from portal.core.security import verify_admin_password
from portal.schemas.auth import LoginRequest, Token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
async def login_admin(payload: LoginRequest):
    if not verify_admin_password(payload.password):
        logger.warning("Rejected admin login attempt")
        raise AuthenticationError("Invalid credentials", ErrorCode.INVALID_CREDENTIALS)
    expires_minutes = get_settings().security.access_token_expire_minutes
    access = create_access_token("admin", scopes=[ADMIN_SCOPE], expires_minutes=expires_minutes)
    logger.info("Admin session issued")
    return Token(access_token=access, expires_in=expires_minutes * 60)
