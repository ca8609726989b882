from __future__ import annotations

"""
🎬 What-to-Watch — Film
=======================

Catalogue entry owned by the user who published it.

`rating` is the running average of comment ratings and `comments_count` the
number of comments; both are maintained by `FilmService.add_rating`.
"""

from datetime import datetime
from typing import List

from beanie import Link

from app.db.base_class import TimestampedDocument
from app.db.models.user import User
from app.schemas.enums import Genre


class Film(TimestampedDocument):
    title: str
    description: str
    published_at: datetime
    genre: Genre
    released: int
    rating: float = 0.0
    preview_video_path: str
    video_path: str
    actors: List[str]
    director: str
    duration: int
    comments_count: int = 0
    poster_image: str
    background_image: str
    background_color: str
    user: Link[User]

    class Settings:
        name = "films"

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Film id={self.id} title={self.title!r}>"
