# ╔══════════════════════════════════════════════════════════════════════════╗
# ║ What-to-Watch · Films API                                                ║
# ╠──────────────────────────────────────────────────────────────────────────╣
# ║ Endpoints:                                                               ║
# ║  - GET    /films                      → List films (newest first)        ║
# ║  - POST   /films                      → Create film (private, 201)       ║
# ║  - GET    /films/{film_id}            → Film details                     ║
# ║  - PATCH  /films/{film_id}            → Update own film (private)        ║
# ║  - DELETE /films/{film_id}            → Delete own film (private, 204)   ║
# ║  - GET    /films/{film_id}/comments   → Film comments (newest first)     ║
# ║  - POST   /films/{film_id}/poster     → Upload own film poster (private) ║
# ╠──────────────────────────────────────────────────────────────────────────╣
# ║ Guards run in declaration order: private gate → ObjectId check →         ║
# ║ existence (404) → ownership (409).                                       ║
# ╚══════════════════════════════════════════════════════════════════════════╝
"""Film catalogue endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import CheckOwner, DocumentExists, ValidateObjectId, require_user
from app.api.uploads import SingleFileUpload, UploadedFile
from app.core.container import get_comment_service, get_film_service, get_watchlist_service
from app.schemas.auth import TokenUser
from app.schemas.comment import CommentResponse
from app.schemas.common import fill_dto, fill_dto_list
from app.schemas.enums import Genre
from app.schemas.film import (
    CreateFilmDto,
    FilmListItemResponse,
    FilmResponse,
    UpdateFilmDto,
    UploadPosterResponse,
)
from app.services.comment_service import CommentService
from app.services.film_service import DEFAULT_FILM_COUNT, FilmService
from app.services.watchlist_service import WatchlistService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Films"],
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
    },
)

# Shared guard chains
_film_id_valid = Depends(ValidateObjectId("film_id"))
_film_exists = Depends(DocumentExists("film_service", "Film", "film_id"))
_film_owner = Depends(CheckOwner("film_service", "Film", "film_id"))
_private = Depends(require_user)


@router.get("", response_model=List[FilmListItemResponse], summary="List films")
async def index(
    limit: int = Query(DEFAULT_FILM_COUNT, ge=1, le=500),
    genre: Optional[Genre] = Query(None),
    films: FilmService = Depends(get_film_service),
):
    found = await films.find(limit=limit, genre=genre)
    return fill_dto_list(FilmListItemResponse, found)


@router.post(
    "",
    response_model=FilmResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a film",
)
async def create(
    dto: CreateFilmDto,
    user: TokenUser = Depends(require_user),
    films: FilmService = Depends(get_film_service),
):
    film = await films.create(dto, user.id)
    return fill_dto(FilmResponse, film)


@router.get(
    "/{film_id}",
    response_model=FilmResponse,
    dependencies=[_film_id_valid, _film_exists],
    summary="Film details",
)
async def show(film_id: str, films: FilmService = Depends(get_film_service)):
    film = await films.find_by_id(film_id)
    return fill_dto(FilmResponse, film)


@router.patch(
    "/{film_id}",
    response_model=FilmResponse,
    dependencies=[_private, _film_id_valid, _film_exists, _film_owner],
    summary="Update a film",
)
async def update(film_id: str, dto: UpdateFilmDto, films: FilmService = Depends(get_film_service)):
    film = await films.update_by_id(film_id, dto)
    return fill_dto(FilmResponse, film)


@router.delete(
    "/{film_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[_private, _film_id_valid, _film_exists, _film_owner],
    summary="Delete a film",
)
async def delete(
    film_id: str,
    films: FilmService = Depends(get_film_service),
    comments: CommentService = Depends(get_comment_service),
    watchlist: WatchlistService = Depends(get_watchlist_service),
):
    # 1) Film itself
    await films.delete_by_id(film_id)

    # 2) Dependent documents
    removed_comments = await comments.delete_by_film_id(film_id)
    await watchlist.delete_by_film_id(film_id)
    logger.info("Film %s deleted with %d comment(s)", film_id, removed_comments)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{film_id}/comments",
    response_model=List[CommentResponse],
    dependencies=[_film_id_valid, _film_exists],
    summary="Comments for a film",
)
async def get_comments(film_id: str, comments: CommentService = Depends(get_comment_service)):
    found = await comments.find_by_film_id(film_id)
    return fill_dto_list(CommentResponse, found)


@router.post(
    "/{film_id}/poster",
    response_model=UploadPosterResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[_private, _film_id_valid, _film_exists, _film_owner],
    summary="Upload a film poster",
)
async def upload_poster(
    film_id: str,
    uploaded: UploadedFile = Depends(SingleFileUpload("poster")),
    films: FilmService = Depends(get_film_service),
):
    await films.update_poster(film_id, uploaded.filename)
    return UploadPosterResponse(poster_image=uploaded.filename)


__all__ = ["router"]
