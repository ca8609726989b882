# app/core/security.py
from __future__ import annotations

"""
What-to-Watch — Authentication & Security Helpers
=================================================
- Salted password hashing (Passlib / bcrypt)
- Access token creation (HS256 by default, `sub`/`email`/`name`/`iat`/`exp`)

Decoding lives in `app.core.jwt`; this module only *creates* tokens.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from jose import jwt
from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
logger = logging.getLogger(__name__)


# ───────────────────────────────────────────────
# 🔐 Password Hashing Utilities
# ───────────────────────────────────────────────
def get_password_hash(password: str) -> str:
    """Return a salted hash using Passlib's bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time verify of a plaintext password against a stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


# ───────────────────────────────────────────────
# 🪪 JWT — Access Token Generation
# ───────────────────────────────────────────────
def create_access_token(
    user_id: Any,
    *,
    email: Optional[str] = None,
    name: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed access token identifying `user_id`."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRES_IN_MINUTES))

    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "iat": now,
        "exp": expire,
    }
    if email:
        payload["email"] = email
    if name:
        payload["name"] = name

    token = jwt.encode(payload, settings.JWT_SECRET.get_secret_value(), algorithm=settings.JWT_ALGORITHM)
    logger.debug("Issued access token for user %s", user_id)
    return token


__all__ = [
    "pwd_context",
    "get_password_hash",
    "verify_password",
    "create_access_token",
]
