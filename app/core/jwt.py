# app/core/jwt.py
from __future__ import annotations

"""
What-to-Watch — JWT helpers
===========================
- `decode_token` verifies signature and `exp` against `JWT_SECRET`
- Case-insensitive Bearer token extraction from raw header values
- `token_user_from_payload` maps claims onto the `TokenUser` identity

Notes
-----
- Token *creation* lives in `app.core.security`.
- Failures raise `UnauthorizedException`; the authenticate middleware catches
  it and lets the request continue unauthenticated.
"""

from typing import Any, Dict, Optional
import logging

from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import settings
from app.core.exceptions import UnauthorizedException
from app.schemas.auth import TokenUser

logger = logging.getLogger(__name__)

COMPONENT = "AuthenticateMiddleware"


# ─────────────────────────────────────────────────────────────
# 🔓 Decode JWT Token
# ─────────────────────────────────────────────────────────────
def decode_token(token: str, *, secret: Optional[str] = None) -> Dict[str, Any]:
    """Decode and validate a JWT.

    Raises
    ------
    UnauthorizedException
        On bad signature, expiry, malformed token, or missing `sub`.
    """
    key = secret or settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(token, key, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise UnauthorizedException("Token has expired.", component=COMPONENT)
    except JWTError as e:
        logger.debug("JWT decoding failed: %s", e)
        raise UnauthorizedException("Invalid token.", component=COMPONENT)

    if not payload.get("sub"):
        raise UnauthorizedException("Token missing user ID.", component=COMPONENT)
    return payload


# ─────────────────────────────────────────────────────────────
# 📥 Extract Bearer Token from Authorization Header
# ─────────────────────────────────────────────────────────────
def get_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """Return the token from `Bearer <token>`; None when absent or malformed."""
    if not auth_header:
        return None
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


def token_user_from_payload(payload: Dict[str, Any]) -> TokenUser:
    return TokenUser(id=str(payload["sub"]), email=payload.get("email"), name=payload.get("name"))


__all__ = ["decode_token", "get_bearer_token", "token_user_from_payload"]
