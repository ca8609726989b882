from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, constr

from app.schemas.common import IdStr, ResponseModel
from app.schemas.user import UserResponse


class CreateCommentDto(BaseModel):
    text: constr(strip_whitespace=True, min_length=5, max_length=1024)
    rating: int = Field(..., ge=1, le=10)
    film_id: constr(pattern=r"^[0-9a-fA-F]{24}$")


class CommentResponse(ResponseModel):
    id: IdStr
    text: str
    rating: int
    created_at: datetime
    film_id: IdStr = Field(validation_alias="film")
    user: UserResponse
