from __future__ import annotations

"""
What-to-Watch — Dependency container
====================================

Wires config, the database client and every service once at startup. The
instance lives on `app.state.container`; routes reach it through the provider
dependencies below, never through module globals.

Tests build a `Container` directly from fakes and pass it to `create_app`.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from app.core.config import Settings
from app.db.client import DatabaseClient
from app.services.comment_service import CommentService
from app.services.film_service import FilmService
from app.services.promo_film_service import PromoFilmService
from app.services.user_service import UserService
from app.services.watchlist_service import WatchlistService


@dataclass
class Container:
    settings: Settings
    user_service: UserService
    film_service: FilmService
    comment_service: CommentService
    watchlist_service: WatchlistService
    promo_film_service: PromoFilmService
    database_client: Optional[DatabaseClient] = None

    @classmethod
    def build(cls, settings: Settings, database_client: DatabaseClient) -> "Container":
        """Production wiring: each service over its beanie document model."""
        return cls(
            settings=settings,
            user_service=UserService(),
            film_service=FilmService(),
            comment_service=CommentService(),
            watchlist_service=WatchlistService(),
            promo_film_service=PromoFilmService(),
            database_client=database_client,
        )


# ─────────────────────────────────────────────────────────────
# 🔌 Providers (FastAPI dependencies)
# ─────────────────────────────────────────────────────────────
def get_container(request: Request) -> Container:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Application container is not initialised")
    return container


def get_settings(request: Request) -> Settings:
    return get_container(request).settings


def get_user_service(request: Request) -> UserService:
    return get_container(request).user_service


def get_film_service(request: Request) -> FilmService:
    return get_container(request).film_service


def get_comment_service(request: Request) -> CommentService:
    return get_container(request).comment_service


def get_watchlist_service(request: Request) -> WatchlistService:
    return get_container(request).watchlist_service


def get_promo_film_service(request: Request) -> PromoFilmService:
    return get_container(request).promo_film_service


__all__ = [
    "Container",
    "get_container",
    "get_settings",
    "get_user_service",
    "get_film_service",
    "get_comment_service",
    "get_watchlist_service",
    "get_promo_film_service",
]
