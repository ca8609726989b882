"""
What-to-Watch · Route dependencies
==================================

Per-route request guards, declared in order on each route:

- `require_user`     : private-route gate (401 when anonymous)
- `ValidateObjectId` : 400 when a path id is not a 24-hex ObjectId
- `DocumentExists`   : 404 when the addressed entity is missing
- `CheckOwner`       : 409 when the caller does not own the entity

Services are looked up on the container by attribute name
(e.g. ``"film_service"``) so one guard class serves every resource.
"""

import logging
import re
from typing import Any

from fastapi import Depends, Request

from app.core.container import Container, get_container
from app.core.exceptions import BadRequestException, ConflictException, NotFoundException, UnauthorizedException
from app.db.base_class import ref_id
from app.middleware.authenticate import get_request_user
from app.schemas.auth import TokenUser

logger = logging.getLogger(__name__)

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def is_object_id(value: Any) -> bool:
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value))


# ─────────────────────────────────────────────────────────────────────────────
# 🔐 Private route
# ─────────────────────────────────────────────────────────────────────────────
async def require_user(request: Request) -> TokenUser:
    user = get_request_user(request)
    if user is None:
        raise UnauthorizedException("Unauthorized", component="PrivateRouteMiddleware")
    return user


# ─────────────────────────────────────────────────────────────────────────────
# 🧩 Path id guards
# ─────────────────────────────────────────────────────────────────────────────
class ValidateObjectId:
    def __init__(self, param: str) -> None:
        self.param = param

    async def __call__(self, request: Request) -> str:
        value = request.path_params.get(self.param)
        if not is_object_id(value):
            raise BadRequestException(f"{value} is invalid ObjectID", component="ValidateObjectIdMiddleware")
        return value


class DocumentExists:
    def __init__(self, service_attr: str, entity_name: str, param: str) -> None:
        self.service_attr = service_attr
        self.entity_name = entity_name
        self.param = param

    async def __call__(self, request: Request, container: Container = Depends(get_container)) -> None:
        document_id = request.path_params.get(self.param)
        service = getattr(container, self.service_attr)
        if not await service.exists(document_id):
            raise NotFoundException(
                f"{self.entity_name} with {document_id} not found.",
                component="DocumentExistsMiddleware",
            )


class CheckOwner:
    """Let the request through only when the entity's `user` reference is the caller."""

    def __init__(self, service_attr: str, entity_name: str, param: str) -> None:
        self.service_attr = service_attr
        self.entity_name = entity_name
        self.param = param

    async def __call__(
        self,
        request: Request,
        user: TokenUser = Depends(require_user),
        container: Container = Depends(get_container),
    ) -> None:
        document_id = request.path_params.get(self.param)
        service = getattr(container, self.service_attr)
        entity = await service.find_by_id(document_id)

        owner_id = ref_id(getattr(entity, "user", None)) if entity is not None else None
        if owner_id is not None and owner_id == user.id:
            return

        logger.info("User %s denied edit on %s %s", user.id, self.entity_name, document_id)
        raise ConflictException(
            f"{self.entity_name} with {document_id} not edit",
            component="CheckUserMiddleware",
        )


__all__ = ["is_object_id", "require_user", "ValidateObjectId", "DocumentExists", "CheckOwner"]
