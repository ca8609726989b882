from __future__ import annotations

"""
🎬 What-to-Watch — WatchlistEntry (user ↔ film bookmark)
========================================================

One document per (user, film) pair. Uniqueness is checked by the watchlist
route before insert; there is no compound unique index.
"""

from beanie import Link

from app.db.base_class import TimestampedDocument
from app.db.models.film import Film
from app.db.models.user import User


class WatchlistEntry(TimestampedDocument):
    user: Link[User]
    film: Link[Film]

    class Settings:
        name = "watchlist"

    def __repr__(self) -> str:  # pragma: no cover
        return f"<WatchlistEntry id={self.id}>"
