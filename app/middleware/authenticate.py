# app/middleware/authenticate.py
from __future__ import annotations

"""
# What-to-Watch — Authenticate Middleware (pure ASGI)

- Reads `Authorization: Bearer <token>`, verifies it against `JWT_SECRET`
  and attaches a `TokenUser` to `request.state.user`.
- Missing or invalid tokens never fail the request here: `request.state.user`
  is set to `None` and the private-route gate (`app.api.dependencies.require_user`)
  decides later.

## Usage
    app.add_middleware(AuthenticateMiddleware, secret=settings.JWT_SECRET.get_secret_value())
"""

import logging
from typing import Optional

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

from app.core.exceptions import UnauthorizedException
from app.core.jwt import decode_token, get_bearer_token, token_user_from_payload
from app.schemas.auth import TokenUser

logger = logging.getLogger(__name__)


class AuthenticateMiddleware:
    def __init__(self, app: ASGIApp, secret: Optional[str] = None) -> None:
        self.app = app
        self.secret = secret

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        state = scope.setdefault("state", {})
        state["user"] = self._authenticate(Headers(scope=scope))
        await self.app(scope, receive, send)

    def _authenticate(self, headers: Headers) -> Optional[TokenUser]:
        token = get_bearer_token(headers.get("Authorization"))
        if token is None:
            return None
        try:
            payload = decode_token(token, secret=self.secret)
        except UnauthorizedException as exc:
            logger.warning("Ignoring bearer token: %s", exc.message)
            return None
        return token_user_from_payload(payload)


def get_request_user(request) -> Optional[TokenUser]:
    """The authenticated identity, or None for anonymous requests."""
    return getattr(getattr(request, "state", object()), "user", None)


__all__ = ["AuthenticateMiddleware", "get_request_user"]
