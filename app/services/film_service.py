"""
Film service
============

CRUD over the `Film` document plus the rating bookkeeping driven by new
comments. Detail reads populate the owning user; list reads do not.
"""

import logging
from typing import Any, List, Optional, Type

from beanie import PydanticObjectId
from bson import DBRef

from app.db.models.film import Film
from app.db.models.user import User
from app.schemas.enums import Genre
from app.schemas.film import CreateFilmDto, UpdateFilmDto

logger = logging.getLogger(__name__)

DEFAULT_FILM_COUNT = 60


class FilmService:
    def __init__(self, model: Type[Any] = Film) -> None:
        self.model = model

    async def create(self, dto: CreateFilmDto, user_id: str) -> Any:
        film = self.model(
            **dto.to_document(),
            user=DBRef(User.Settings.name, PydanticObjectId(user_id)),
        )
        await film.insert()
        await film.fetch_all_links()
        logger.info("New film created: %s", film.title)
        return film

    async def find_by_id(self, film_id: str) -> Optional[Any]:
        return await self.model.get(PydanticObjectId(film_id), fetch_links=True)

    async def find(self, limit: int = DEFAULT_FILM_COUNT, genre: Optional[Genre] = None) -> List[Any]:
        query = {"genre": genre.value} if genre else {}
        return await self.model.find(query).sort("-published_at").limit(limit).to_list()

    async def update_by_id(self, film_id: str, dto: UpdateFilmDto) -> Optional[Any]:
        film = await self.find_by_id(film_id)
        if film is None:
            return None
        for key, value in dto.to_patch().items():
            setattr(film, key, value)
        await film.save()
        return film

    async def delete_by_id(self, film_id: str) -> Optional[Any]:
        film = await self.model.get(PydanticObjectId(film_id))
        if film is None:
            return None
        await film.delete()
        logger.info("Film deleted: %s", film_id)
        return film

    async def exists(self, film_id: str) -> bool:
        return await self.model.get(PydanticObjectId(film_id)) is not None

    async def add_rating(self, film_id: str, rating: int) -> Optional[Any]:
        """Fold a new comment rating into the running average and bump the count."""
        film = await self.model.get(PydanticObjectId(film_id))
        if film is None:
            return None
        count = film.comments_count or 0
        film.rating = round(((film.rating or 0.0) * count + rating) / (count + 1), 1)
        film.comments_count = count + 1
        await film.save()
        return film

    async def update_poster(self, film_id: str, poster_image: str) -> Optional[Any]:
        film = await self.model.get(PydanticObjectId(film_id))
        if film is None:
            return None
        film.poster_image = poster_image
        await film.save()
        return film
