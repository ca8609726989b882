# app/schemas/auth.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, constr


# ──────────────── Token identity ────────────────
class TokenUser(BaseModel):
    """Identity attached to `request.state.user` by the authenticate middleware."""
    model_config = ConfigDict(frozen=True)

    id: str
    email: Optional[str] = None
    name: Optional[str] = None


# ──────────────── Login ────────────────
class LoginUserDto(BaseModel):
    email: EmailStr
    password: constr(min_length=6, max_length=12)


class LoggedUserResponse(BaseModel):
    token: str
    email: str
    name: str
    avatar_path: Optional[str] = None
