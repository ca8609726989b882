"""Comment service: create and list comments attached to a film."""

import logging
from typing import Any, List, Type

from beanie import PydanticObjectId
from bson import DBRef

from app.db.models.comment import Comment
from app.db.models.film import Film
from app.db.models.user import User
from app.schemas.comment import CreateCommentDto

logger = logging.getLogger(__name__)

DEFAULT_COMMENT_COUNT = 50


class CommentService:
    def __init__(self, model: Type[Any] = Comment) -> None:
        self.model = model

    async def create(self, dto: CreateCommentDto, user_id: str) -> Any:
        comment = self.model(
            text=dto.text,
            rating=dto.rating,
            film=DBRef(Film.Settings.name, PydanticObjectId(dto.film_id)),
            user=DBRef(User.Settings.name, PydanticObjectId(user_id)),
        )
        await comment.insert()
        await comment.fetch_all_links()
        logger.info("New comment on film %s", dto.film_id)
        return comment

    async def find_by_film_id(self, film_id: str, limit: int = DEFAULT_COMMENT_COUNT) -> List[Any]:
        comments = await (
            self.model.find({"film.$id": PydanticObjectId(film_id)})
            .sort("-created_at")
            .limit(limit)
            .to_list()
        )
        for comment in comments:
            await comment.fetch_link("user")
        return comments

    async def delete_by_film_id(self, film_id: str) -> int:
        result = await self.model.find({"film.$id": PydanticObjectId(film_id)}).delete()
        return getattr(result, "deleted_count", 0) or 0
