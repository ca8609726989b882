# ╔══════════════════════════════════════════════════════════════════════════╗
# ║ What-to-Watch · Users API                                                ║
# ╠──────────────────────────────────────────────────────────────────────────╣
# ║ Endpoints:                                                               ║
# ║  - POST /users/register              → Create account (201)              ║
# ║  - POST /users/login                 → Issue access token                ║
# ║  - GET  /users/login                 → Current session (private)         ║
# ║  - POST /users/{user_id}/avatar      → Upload own avatar (private, 201)  ║
# ╚══════════════════════════════════════════════════════════════════════════╝
"""
Registration, login and avatar upload.

Passwords are only ever compared through `UserService.verify_user`; response
DTOs never carry the stored hash.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from app.api.dependencies import ValidateObjectId, require_user
from app.api.uploads import SingleFileUpload, UploadedFile
from app.core.container import get_user_service
from app.core.exceptions import ConflictException, UnauthorizedException
from app.core.jwt import get_bearer_token
from app.core.security import create_access_token
from app.schemas.auth import LoggedUserResponse, LoginUserDto, TokenUser
from app.schemas.common import fill_dto
from app.schemas.user import CreateUserDto, UploadAvatarResponse, UserResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

COMPONENT = "UserController"

router = APIRouter(
    tags=["Users"],
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        409: {"description": "Conflict"},
    },
)


def _logged_user(user, token: str) -> LoggedUserResponse:
    return LoggedUserResponse(
        token=token,
        email=user.email,
        name=user.name,
        avatar_path=getattr(user, "avatar_path", None),
    )


async def require_same_user(request: Request, user: TokenUser = Depends(require_user)) -> TokenUser:
    """Only the account owner may change their own profile assets."""
    user_id = request.path_params.get("user_id")
    if user_id != user.id:
        raise ConflictException(f"User with {user_id} not edit", component="CheckUserMiddleware")
    return user


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(dto: CreateUserDto, users: UserService = Depends(get_user_service)):
    # 1) Email must be free
    if await users.find_by_email(dto.email):
        raise ConflictException(f"User with email «{dto.email}» exists.", component=COMPONENT)

    # 2) Persist & shape
    user = await users.create(dto)
    return fill_dto(UserResponse, user)


@router.post("/login", response_model=LoggedUserResponse, summary="Log in with email and password")
async def login(dto: LoginUserDto, users: UserService = Depends(get_user_service)):
    user = await users.verify_user(dto)
    if user is None:
        raise UnauthorizedException("Unauthorized", component=COMPONENT)

    token = create_access_token(str(user.id), email=user.email, name=user.name)
    logger.info("User %s logged in", user.email)
    return _logged_user(user, token)


@router.get("/login", response_model=LoggedUserResponse, summary="Check the current session")
async def check_authenticate(
    request: Request,
    user: TokenUser = Depends(require_user),
    users: UserService = Depends(get_user_service),
):
    found = await users.find_by_id(user.id)
    if found is None:
        raise UnauthorizedException("Unauthorized", component=COMPONENT)
    token = get_bearer_token(request.headers.get("Authorization")) or ""
    return _logged_user(found, token)


@router.post(
    "/{user_id}/avatar",
    response_model=UploadAvatarResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[
        Depends(require_user),
        Depends(ValidateObjectId("user_id")),
        Depends(require_same_user),
    ],
    summary="Upload the caller's avatar",
)
async def upload_avatar(
    user_id: str,
    uploaded: UploadedFile = Depends(SingleFileUpload("avatar")),
    users: UserService = Depends(get_user_service),
):
    await users.update_avatar(user_id, uploaded.filename)
    return UploadAvatarResponse(avatar_path=uploaded.filename)


__all__ = ["router"]
