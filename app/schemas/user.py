from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, EmailStr, constr

from app.schemas.common import IdStr, ResponseModel


class CreateUserDto(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=15)
    email: EmailStr
    password: constr(min_length=6, max_length=12)


class UserResponse(ResponseModel):
    id: IdStr
    name: str
    email: str
    avatar_path: Optional[str] = None


class UploadAvatarResponse(BaseModel):
    avatar_path: str
