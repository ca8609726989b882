from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, HttpUrl, constr, field_validator

from app.schemas.common import IdStr, ResponseModel
from app.schemas.enums import Genre
from app.schemas.user import UserResponse

_IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png")


def _image_path(v: Optional[str]) -> Optional[str]:
    if v is not None and not v.lower().endswith(_IMAGE_SUFFIXES):
        raise ValueError("must be a .jpg or .png image")
    return v


class CreateFilmDto(BaseModel):
    title: constr(strip_whitespace=True, min_length=2, max_length=100)
    description: constr(strip_whitespace=True, min_length=20, max_length=1024)
    published_at: datetime
    genre: Genre
    released: int = Field(..., ge=1895, le=2100)
    preview_video_path: HttpUrl
    video_path: HttpUrl
    actors: List[constr(strip_whitespace=True, min_length=1)] = Field(..., min_length=1)
    director: constr(strip_whitespace=True, min_length=2, max_length=50)
    duration: int = Field(..., ge=1, le=1000, description="Running time in minutes")
    poster_image: str
    background_image: str
    background_color: constr(strip_whitespace=True, min_length=1, max_length=32)

    @field_validator("poster_image", "background_image")
    @classmethod
    def check_images(cls, v):
        return _image_path(v)

    def to_document(self) -> dict:
        data = self.model_dump()
        data["preview_video_path"] = str(self.preview_video_path)
        data["video_path"] = str(self.video_path)
        return data


class UpdateFilmDto(BaseModel):
    title: Optional[constr(strip_whitespace=True, min_length=2, max_length=100)] = None
    description: Optional[constr(strip_whitespace=True, min_length=20, max_length=1024)] = None
    published_at: Optional[datetime] = None
    genre: Optional[Genre] = None
    released: Optional[int] = Field(None, ge=1895, le=2100)
    preview_video_path: Optional[HttpUrl] = None
    video_path: Optional[HttpUrl] = None
    actors: Optional[List[constr(strip_whitespace=True, min_length=1)]] = Field(None, min_length=1)
    director: Optional[constr(strip_whitespace=True, min_length=2, max_length=50)] = None
    duration: Optional[int] = Field(None, ge=1, le=1000)
    poster_image: Optional[str] = None
    background_image: Optional[str] = None
    background_color: Optional[constr(strip_whitespace=True, min_length=1, max_length=32)] = None

    @field_validator("poster_image", "background_image")
    @classmethod
    def check_images(cls, v):
        return _image_path(v)

    def to_patch(self) -> dict:
        """Only the fields the client actually sent."""
        data = self.model_dump(exclude_unset=True)
        for key in ("preview_video_path", "video_path"):
            if data.get(key) is not None:
                data[key] = str(data[key])
        return data


class FilmListItemResponse(ResponseModel):
    id: IdStr
    title: str
    published_at: datetime
    genre: Genre
    preview_video_path: str
    poster_image: str
    comments_count: int = 0


class FilmResponse(ResponseModel):
    id: IdStr
    title: str
    description: str
    published_at: datetime
    genre: Genre
    released: int
    rating: float
    preview_video_path: str
    video_path: str
    actors: List[str]
    director: str
    duration: int
    comments_count: int
    poster_image: str
    background_image: str
    background_color: str
    user: UserResponse


class UploadPosterResponse(BaseModel):
    poster_image: str
