"""Watchlist service: per-user film bookmarks."""

import logging
from typing import Any, List, Optional, Type

from beanie import PydanticObjectId
from bson import DBRef

from app.db.models.film import Film
from app.db.models.user import User
from app.db.models.watchlist import WatchlistEntry

logger = logging.getLogger(__name__)


class WatchlistService:
    def __init__(self, model: Type[Any] = WatchlistEntry) -> None:
        self.model = model

    async def create(self, user_id: str, film_id: str) -> Any:
        entry = self.model(
            user=DBRef(User.Settings.name, PydanticObjectId(user_id)),
            film=DBRef(Film.Settings.name, PydanticObjectId(film_id)),
        )
        await entry.insert()
        await entry.fetch_all_links()
        return entry

    async def find_by_user_id(self, user_id: str) -> List[Any]:
        entries = await self.model.find({"user.$id": PydanticObjectId(user_id)}).sort("-created_at").to_list()
        for entry in entries:
            await entry.fetch_link("film")
        return entries

    async def find_by_user_id_and_film_id(self, user_id: str, film_id: str) -> Optional[Any]:
        return await self.model.find_one(
            {"user.$id": PydanticObjectId(user_id), "film.$id": PydanticObjectId(film_id)}
        )

    async def delete(self, user_id: str, film_id: str) -> int:
        result = await self.model.find(
            {"user.$id": PydanticObjectId(user_id), "film.$id": PydanticObjectId(film_id)}
        ).delete()
        return getattr(result, "deleted_count", 0) or 0

    async def delete_by_film_id(self, film_id: str) -> int:
        result = await self.model.find({"film.$id": PydanticObjectId(film_id)}).delete()
        deleted = getattr(result, "deleted_count", 0) or 0
        if deleted:
            logger.info("Removed film %s from %d watchlist(s)", film_id, deleted)
        return deleted
