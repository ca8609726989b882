"""Promo film service: the single featured film."""

import logging
from typing import Any, Optional, Type

from beanie import PydanticObjectId
from bson import DBRef

from app.db.models.film import Film
from app.db.models.promo_film import PromoFilm

logger = logging.getLogger(__name__)


class PromoFilmService:
    def __init__(self, model: Type[Any] = PromoFilm) -> None:
        self.model = model

    async def find(self) -> Optional[Any]:
        """Current promo film, populated with its owner; None when unset."""
        promo = await self.model.find_one({})
        if promo is None:
            return None
        await promo.fetch_link("film")
        film = promo.film
        if not hasattr(film, "fetch_link"):
            # dangling reference: the film was deleted after being promoted
            return None
        await film.fetch_link("user")
        return film

    async def set(self, film_id: str) -> Optional[Any]:
        await self.model.find({}).delete()
        promo = self.model(film=DBRef(Film.Settings.name, PydanticObjectId(film_id)))
        await promo.insert()
        logger.info("Promo film set to %s", film_id)
        return await self.find()
