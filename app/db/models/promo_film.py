from __future__ import annotations

from beanie import Link

from app.db.base_class import TimestampedDocument
from app.db.models.film import Film


class PromoFilm(TimestampedDocument):
    """The featured film. The collection holds at most one document."""

    film: Link[Film]

    class Settings:
        name = "promo"
