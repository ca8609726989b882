# app/db/models/__init__.py
"""
What-to-Watch — Document registry
=================================

Every beanie document model, in dependency order. `DOCUMENT_MODELS` is what
`DatabaseClient.connect` hands to `init_beanie`.
"""

from .user import User
from .film import Film
from .comment import Comment
from .watchlist import WatchlistEntry
from .promo_film import PromoFilm

DOCUMENT_MODELS = [User, Film, Comment, WatchlistEntry, PromoFilm]

__all__ = ["User", "Film", "Comment", "WatchlistEntry", "PromoFilm", "DOCUMENT_MODELS"]
