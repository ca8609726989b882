"""
What-to-Watch · Comments API
============================

- POST /comments → create a comment on an existing film (private, 201)

The author is always the authenticated caller; a new comment also folds its
rating into the film's average and bumps the film's comment count.
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import require_user
from app.core.container import get_comment_service, get_film_service
from app.core.exceptions import NotFoundException
from app.schemas.auth import TokenUser
from app.schemas.comment import CommentResponse, CreateCommentDto
from app.schemas.common import fill_dto
from app.services.comment_service import CommentService
from app.services.film_service import FilmService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Comments"])


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a film",
)
async def create(
    dto: CreateCommentDto,
    user: TokenUser = Depends(require_user),
    comments: CommentService = Depends(get_comment_service),
    films: FilmService = Depends(get_film_service),
):
    # 1) Film must exist
    if not await films.exists(dto.film_id):
        raise NotFoundException(f"Film with id {dto.film_id} not found.", component="CommentController")

    # 2) Comment + rating bookkeeping
    comment = await comments.create(dto, user.id)
    await films.add_rating(dto.film_id, dto.rating)
    return fill_dto(CommentResponse, comment)


__all__ = ["router"]
