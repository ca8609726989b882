"""
🧭 What-to-Watch • Router Aggregator
====================================

Composes every resource router under its fixed prefix.

    from app.api.routers import build_router
    app.include_router(build_router())
"""

import logging

from fastapi import APIRouter
from fastapi.routing import APIRoute

from .comments import router as comments_router
from .films import router as films_router
from .promo import router as promo_router
from .users import router as users_router
from .watchlist import router as watchlist_router

logger = logging.getLogger(__name__)

ROUTERS = (
    ("/films", films_router),
    ("/users", users_router),
    ("/comments", comments_router),
    ("/watchlist", watchlist_router),
    ("/promo", promo_router),
)


def build_router() -> APIRouter:
    """Return one router carrying all resource routes, logging each registration."""
    r = APIRouter()
    for prefix, child in ROUTERS:
        r.include_router(child, prefix=prefix)
        for route in child.routes:
            if isinstance(route, APIRoute):
                for method in sorted(route.methods):
                    logger.info("Route registered: %s %s%s", method, prefix, route.path)
    return r


__all__ = ["build_router", "ROUTERS"]
