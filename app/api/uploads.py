"""
What-to-Watch · Single-file upload dependency
=============================================

Accepts one multipart field, stores it under the configured upload directory
with a random name, and hands the result to the route.

- Name: ``uuid4().hex`` + extension derived from the declared MIME type
  (``image/jpeg`` → ``.jpg``). Files are opened with ``"xb"`` so an existing
  file is never overwritten.
- Body is streamed to disk in chunks with aiofiles.
"""

import logging
import mimetypes
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import Depends, Request
from starlette.datastructures import UploadFile

from app.core.container import Container, get_container
from app.core.exceptions import BadRequestException

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
_MAX_NAME_ATTEMPTS = 5


@dataclass(frozen=True)
class UploadedFile:
    filename: str
    path: Path
    content_type: Optional[str]


def extension_for(content_type: Optional[str]) -> str:
    """File extension (with dot) for a MIME type; empty when unknown."""
    if not content_type:
        return ""
    return mimetypes.guess_extension(content_type.split(";")[0].strip().lower()) or ""


def generate_filename(content_type: Optional[str]) -> str:
    return f"{uuid.uuid4().hex}{extension_for(content_type)}"


async def save_upload(upload: UploadFile, directory: Path) -> UploadedFile:
    directory.mkdir(parents=True, exist_ok=True)
    for _ in range(_MAX_NAME_ATTEMPTS):
        filename = generate_filename(upload.content_type)
        path = directory / filename
        try:
            async with aiofiles.open(path, "xb") as out:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    await out.write(chunk)
        except FileExistsError:
            continue
        logger.info("Stored upload %s (%s)", filename, upload.content_type)
        return UploadedFile(filename=filename, path=path, content_type=upload.content_type)
    raise RuntimeError("Could not allocate a unique upload filename")


class SingleFileUpload:
    """Route dependency reading multipart field `field_name` into the upload directory."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    async def __call__(self, request: Request, container: Container = Depends(get_container)) -> UploadedFile:
        form = await request.form()
        upload = form.get(self.field_name)
        if not isinstance(upload, UploadFile):
            raise BadRequestException(f"Field \"{self.field_name}\" must contain a file", component="UploadFileMiddleware")
        try:
            return await save_upload(upload, Path(container.settings.UPLOAD_DIRECTORY))
        finally:
            await upload.close()


__all__ = ["UploadedFile", "SingleFileUpload", "extension_for", "generate_filename", "save_upload"]
