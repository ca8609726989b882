"""
User service
============

Thin pass-through over the `User` document. The model class is injected so
the container decides what backs it (beanie in production, fakes in tests).
"""

import logging
from typing import Any, Optional, Type

from beanie import PydanticObjectId

from app.db.models.user import DEFAULT_AVATAR_FILE_NAME, User
from app.schemas.auth import LoginUserDto
from app.schemas.user import CreateUserDto

logger = logging.getLogger(__name__)


def _norm_email(email: str) -> str:
    return (email or "").strip().lower()


class UserService:
    def __init__(self, model: Type[Any] = User) -> None:
        self.model = model

    async def create(self, dto: CreateUserDto) -> Any:
        user = self.model(
            name=dto.name,
            email=_norm_email(dto.email),
            avatar_path=DEFAULT_AVATAR_FILE_NAME,
        )
        user.set_password(dto.password)
        await user.insert()
        logger.info("New user created: %s", user.email)
        return user

    async def find_by_id(self, user_id: str) -> Optional[Any]:
        return await self.model.get(PydanticObjectId(user_id))

    async def find_by_email(self, email: str) -> Optional[Any]:
        return await self.model.find_one({"email": _norm_email(email)})

    async def find_by_email_or_create(self, dto: CreateUserDto) -> Any:
        existing = await self.find_by_email(dto.email)
        if existing:
            return existing
        return await self.create(dto)

    async def verify_user(self, dto: LoginUserDto) -> Optional[Any]:
        """Return the user when the password matches, else None."""
        user = await self.find_by_email(dto.email)
        if not user:
            return None
        if user.verify_password(dto.password):
            return user
        return None

    async def update_avatar(self, user_id: str, avatar_path: str) -> Optional[Any]:
        user = await self.find_by_id(user_id)
        if user is None:
            return None
        user.avatar_path = avatar_path
        await user.save()
        return user

    async def exists(self, user_id: str) -> bool:
        return await self.find_by_id(user_id) is not None
