"""
What-to-Watch · Promo film API
==============================

- GET  /promo → the featured film (404 when none is set)
- POST /promo → feature an existing film (private, 201)
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import require_user
from app.core.container import get_film_service, get_promo_film_service
from app.core.exceptions import NotFoundException
from app.schemas.common import fill_dto
from app.schemas.film import FilmResponse
from app.schemas.promo import CreatePromoFilmDto
from app.services.film_service import FilmService
from app.services.promo_film_service import PromoFilmService

logger = logging.getLogger(__name__)

COMPONENT = "PromoFilmController"

router = APIRouter(tags=["Promo"])


@router.get("", response_model=FilmResponse, summary="Current promo film")
async def show(promo: PromoFilmService = Depends(get_promo_film_service)):
    film = await promo.find()
    if film is None:
        raise NotFoundException("Promo film is not set.", component=COMPONENT)
    return fill_dto(FilmResponse, film)


@router.post(
    "",
    response_model=FilmResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_user)],
    summary="Set the promo film",
)
async def create(
    dto: CreatePromoFilmDto,
    promo: PromoFilmService = Depends(get_promo_film_service),
    films: FilmService = Depends(get_film_service),
):
    if not await films.exists(dto.film_id):
        raise NotFoundException(f"Film with id {dto.film_id} not found.", component=COMPONENT)

    film = await promo.set(dto.film_id)
    if film is None:
        raise NotFoundException(f"Film with id {dto.film_id} not found.", component=COMPONENT)
    return fill_dto(FilmResponse, film)


__all__ = ["router"]
