from typing import Optional

import bcrypt

from portal.config.settings import get_settings


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    """Verify password against a stored bcrypt hash."""
    if not hashed or not (hashed.startswith("$2b$") or hashed.startswith("$2a$")):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def verify_admin_password(password: str) -> bool:
    """Check a login attempt against the configured admin hash; refused when unset."""
    return verify_password(password, get_settings().security.admin_password_hash)
