# ╔══════════════════════════════════════════════════════════════════════════╗
# ║ What-to-Watch · Watchlist API (private)                                  ║
# ╠──────────────────────────────────────────────────────────────────────────╣
# ║  - GET    /watchlist             → Caller's listed films                 ║
# ║  - POST   /watchlist             → Add a film (201, 404, 409 duplicate)  ║
# ║  - DELETE /watchlist/{film_id}   → Remove a film (204, 404 not listed)   ║
# ╚══════════════════════════════════════════════════════════════════════════╝
"""Per-user watchlist endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import ValidateObjectId, require_user
from app.core.container import get_film_service, get_watchlist_service
from app.core.exceptions import ConflictException, NotFoundException
from app.schemas.auth import TokenUser
from app.schemas.common import fill_dto, fill_dto_list
from app.schemas.film import FilmListItemResponse
from app.schemas.watchlist import CreateWatchlistDto, WatchlistResponse
from app.services.film_service import FilmService
from app.services.watchlist_service import WatchlistService

logger = logging.getLogger(__name__)

COMPONENT = "WatchlistController"

router = APIRouter(
    tags=["Watchlist"],
    responses={
        401: {"description": "Unauthorized"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
    },
)


@router.get("", response_model=List[FilmListItemResponse], summary="List the caller's watchlist")
async def index(
    user: TokenUser = Depends(require_user),
    watchlist: WatchlistService = Depends(get_watchlist_service),
):
    entries = await watchlist.find_by_user_id(user.id)
    # entries whose film has since been deleted still hold an unfetched link
    films = [entry.film for entry in entries if hasattr(entry.film, "title")]
    return fill_dto_list(FilmListItemResponse, films)


@router.post(
    "",
    response_model=WatchlistResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a film to the watchlist",
)
async def create(
    dto: CreateWatchlistDto,
    user: TokenUser = Depends(require_user),
    watchlist: WatchlistService = Depends(get_watchlist_service),
    films: FilmService = Depends(get_film_service),
):
    # 1) Film must exist
    if not await films.exists(dto.film_id):
        raise NotFoundException(f"Film with id {dto.film_id} not found.", component=COMPONENT)

    # 2) One entry per (user, film)
    if await watchlist.find_by_user_id_and_film_id(user.id, dto.film_id):
        raise ConflictException(f"Film with id {dto.film_id} is already in the watchlist.", component=COMPONENT)

    entry = await watchlist.create(user.id, dto.film_id)
    logger.info("User %s added film %s to watchlist", user.id, dto.film_id)
    return fill_dto(WatchlistResponse, entry)


@router.delete(
    "/{film_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_user), Depends(ValidateObjectId("film_id"))],
    summary="Remove a film from the watchlist",
)
async def delete(
    film_id: str,
    user: TokenUser = Depends(require_user),
    watchlist: WatchlistService = Depends(get_watchlist_service),
):
    if not await watchlist.delete(user.id, film_id):
        raise NotFoundException(f"Film with id {film_id} is not in the watchlist.", component=COMPONENT)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
