import asyncio
from io import BytesIO

import pytest
from starlette.datastructures import Headers, UploadFile

from app.api.dependencies import is_object_id
from app.api.uploads import extension_for, generate_filename, save_upload


def _upload(data: bytes, content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=BytesIO(data),
        filename="original-name.png",
        headers=Headers({"content-type": content_type}),
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        ("65f0c0ffee0000000000abcd", True),
        ("65F0C0FFEE0000000000ABCD", True),
        ("65f0c0ffee0000000000abc", False),
        ("65f0c0ffee0000000000abcz", False),
        ("", False),
        (None, False),
    ],
)
def test_is_object_id(value, expected):
    assert is_object_id(value) is expected


def test_extension_from_mime_type():
    assert extension_for("image/png") == ".png"
    assert extension_for("image/jpeg") in {".jpg", ".jpeg", ".jpe"}
    assert extension_for("application/x-made-up") == ""
    assert extension_for(None) == ""


def test_generated_names_are_random_and_ignore_client_name():
    names = {generate_filename("image/png") for _ in range(100)}
    assert len(names) == 100
    assert all(len(n) == 32 + len(".png") for n in names)


@pytest.mark.anyio
async def test_save_upload_writes_file(tmp_path):
    stored = await save_upload(_upload(b"payload"), tmp_path / "nested" / "upload")

    assert stored.path.read_bytes() == b"payload"
    assert stored.filename != "original-name.png"
    assert stored.content_type == "image/png"


@pytest.mark.anyio
async def test_concurrent_uploads_never_collide(tmp_path):
    uploads = [_upload(f"file-{i}".encode()) for i in range(20)]

    stored = await asyncio.gather(*(save_upload(u, tmp_path) for u in uploads))

    assert len({s.filename for s in stored}) == 20
    assert sorted(p.read_bytes() for p in tmp_path.iterdir()) == sorted(f"file-{i}".encode() for i in range(20))


@pytest.mark.anyio
async def test_save_upload_retries_on_name_clash(tmp_path, monkeypatch):
    (tmp_path / "taken.png").write_bytes(b"existing")
    names = iter(["taken.png", "fresh.png"])
    monkeypatch.setattr("app.api.uploads.generate_filename", lambda _ct: next(names))

    stored = await save_upload(_upload(b"new"), tmp_path)

    assert stored.filename == "fresh.png"
    assert (tmp_path / "taken.png").read_bytes() == b"existing"
