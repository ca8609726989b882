from __future__ import annotations

from beanie import Link

from app.db.base_class import TimestampedDocument
from app.db.models.film import Film
from app.db.models.user import User


class Comment(TimestampedDocument):
    """User comment with a 1–10 rating on a film."""

    text: str
    rating: int
    film: Link[Film]
    user: Link[User]

    class Settings:
        name = "comments"
