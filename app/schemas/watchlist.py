from __future__ import annotations

from pydantic import BaseModel, Field, constr

from app.schemas.common import IdStr, ResponseModel
from app.schemas.film import FilmListItemResponse


class CreateWatchlistDto(BaseModel):
    film_id: constr(pattern=r"^[0-9a-fA-F]{24}$")


class WatchlistResponse(ResponseModel):
    id: IdStr
    user_id: IdStr = Field(validation_alias="user")
    film: FilmListItemResponse
