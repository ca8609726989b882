from __future__ import annotations

from pydantic import BaseModel, constr


class CreatePromoFilmDto(BaseModel):
    film_id: constr(pattern=r"^[0-9a-fA-F]{24}$")
