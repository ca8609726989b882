import pytest
from httpx import AsyncClient

from tests.fixtures.fakes import FakeComment, FakeWatchlistEntry, film_payload


# ─────────────────────────────────────────────────────────────
# List / create
# ─────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_create_film(async_client: AsyncClient, user_with_headers):
    user, headers = await user_with_headers()

    resp = await async_client.post("/films", json=film_payload(), headers=headers)

    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["title"] == "The Grand Budapest Hotel"
    assert data["rating"] == 0
    assert data["comments_count"] == 0
    assert data["user"]["id"] == str(user.id)
    assert "password_hash" not in data["user"]


@pytest.mark.anyio
async def test_create_film_requires_auth(async_client: AsyncClient):
    resp = await async_client.post("/films", json=film_payload())
    assert resp.status_code == 401


@pytest.mark.anyio
async def test_create_film_missing_fields_is_400(async_client: AsyncClient, user_with_headers):
    _, headers = await user_with_headers()
    body = film_payload()
    del body["title"]
    del body["genre"]

    resp = await async_client.post("/films", json=body, headers=headers)

    assert resp.status_code == 400
    props = {d["property"] for d in resp.json()["details"]}
    assert props == {"title", "genre"}


@pytest.mark.anyio
async def test_create_film_rejects_non_image_poster(async_client: AsyncClient, user_with_headers):
    _, headers = await user_with_headers()
    resp = await async_client.post("/films", json=film_payload(poster_image="poster.gif"), headers=headers)
    assert resp.status_code == 400
    assert resp.json()["details"][0]["property"] == "poster_image"


@pytest.mark.anyio
async def test_list_films_newest_first_with_limit_and_genre(async_client: AsyncClient, user_with_headers, film_factory):
    user, _ = await user_with_headers()
    await film_factory(user, title="Old comedy", published_at="2020-01-01T00:00:00Z")
    await film_factory(user, title="New comedy", published_at="2024-01-01T00:00:00Z")
    await film_factory(user, title="Some drama", genre="drama", published_at="2022-01-01T00:00:00Z")

    resp = await async_client.get("/films")
    assert [f["title"] for f in resp.json()] == ["New comedy", "Some drama", "Old comedy"]
    assert "user" not in resp.json()[0]

    resp = await async_client.get("/films", params={"limit": 1})
    assert [f["title"] for f in resp.json()] == ["New comedy"]

    resp = await async_client.get("/films", params={"genre": "drama"})
    assert [f["title"] for f in resp.json()] == ["Some drama"]


@pytest.mark.anyio
async def test_list_films_unknown_genre_is_400(async_client: AsyncClient):
    resp = await async_client.get("/films", params={"genre": "western"})
    assert resp.status_code == 400


# ─────────────────────────────────────────────────────────────
# Show / update / delete
# ─────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_show_film(async_client: AsyncClient, user_with_headers, film_factory):
    user, _ = await user_with_headers()
    film = await film_factory(user)

    resp = await async_client.get(f"/films/{film.id}")

    assert resp.status_code == 200
    assert resp.json()["id"] == str(film.id)
    assert resp.json()["user"]["email"] == user.email


@pytest.mark.anyio
async def test_show_film_malformed_id_is_400(async_client: AsyncClient):
    resp = await async_client.get("/films/not-an-id")
    assert resp.status_code == 400
    assert resp.json()["component"] == "ValidateObjectIdMiddleware"


@pytest.mark.anyio
async def test_show_missing_film_is_404(async_client: AsyncClient):
    missing = "65f0c0ffee0000000000abcd"
    resp = await async_client.get(f"/films/{missing}")
    assert resp.status_code == 404
    assert resp.json()["message"] == f"Film with {missing} not found."


@pytest.mark.anyio
async def test_owner_updates_film(async_client: AsyncClient, user_with_headers, film_factory):
    user, headers = await user_with_headers()
    film = await film_factory(user)

    resp = await async_client.patch(f"/films/{film.id}", json={"title": "Renamed", "duration": 120}, headers=headers)

    assert resp.status_code == 200, resp.text
    assert resp.json()["title"] == "Renamed"
    assert resp.json()["duration"] == 120
    assert resp.json()["director"] == "Wes Anderson"


@pytest.mark.anyio
async def test_non_owner_update_is_409(async_client: AsyncClient, user_with_headers, film_factory):
    owner, _ = await user_with_headers(email="owner@example.com")
    _, headers = await user_with_headers(email="intruder@example.com")
    film = await film_factory(owner)

    resp = await async_client.patch(f"/films/{film.id}", json={"title": "Hijacked"}, headers=headers)

    assert resp.status_code == 409
    assert resp.json()["message"] == f"Film with {film.id} not edit"
    assert film.title != "Hijacked"


@pytest.mark.anyio
async def test_update_missing_film_is_404(async_client: AsyncClient, user_with_headers):
    _, headers = await user_with_headers()
    resp = await async_client.patch("/films/65f0c0ffee0000000000abcd", json={"title": "X-Files"}, headers=headers)
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_delete_cascades_comments_and_watchlist(async_client: AsyncClient, user_with_headers, film_factory):
    user, headers = await user_with_headers()
    film = await film_factory(user)
    await async_client.post(
        "/comments", json={"text": "Lovely film", "rating": 8, "film_id": str(film.id)}, headers=headers
    )
    await async_client.post("/watchlist", json={"film_id": str(film.id)}, headers=headers)
    assert FakeComment.store and FakeWatchlistEntry.store

    resp = await async_client.delete(f"/films/{film.id}", headers=headers)

    assert resp.status_code == 204
    assert resp.content == b""
    assert (await async_client.get(f"/films/{film.id}")).status_code == 404
    assert not FakeComment.store
    assert not FakeWatchlistEntry.store


@pytest.mark.anyio
async def test_non_owner_delete_is_409(async_client: AsyncClient, user_with_headers, film_factory):
    owner, _ = await user_with_headers(email="owner@example.com")
    _, headers = await user_with_headers(email="intruder@example.com")
    film = await film_factory(owner)

    resp = await async_client.delete(f"/films/{film.id}", headers=headers)

    assert resp.status_code == 409
    assert (await async_client.get(f"/films/{film.id}")).status_code == 200


# ─────────────────────────────────────────────────────────────
# Comments / poster
# ─────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_film_comments_newest_first(async_client: AsyncClient, user_with_headers, film_factory):
    user, headers = await user_with_headers()
    film = await film_factory(user)
    for text in ("First comment", "Second comment"):
        await async_client.post("/comments", json={"text": text, "rating": 5, "film_id": str(film.id)}, headers=headers)
    first = next(c for c in FakeComment.store.values() if c.text == "First comment")
    first.created_at = first.created_at.replace(year=2000)

    resp = await async_client.get(f"/films/{film.id}/comments")

    assert resp.status_code == 200
    assert [c["text"] for c in resp.json()] == ["Second comment", "First comment"]
    assert resp.json()[0]["user"]["id"] == str(user.id)
    assert resp.json()[0]["film_id"] == str(film.id)


@pytest.mark.anyio
async def test_comments_for_missing_film_is_404(async_client: AsyncClient):
    resp = await async_client.get("/films/65f0c0ffee0000000000abcd/comments")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_owner_uploads_poster(async_client: AsyncClient, user_with_headers, film_factory, test_settings):
    user, headers = await user_with_headers()
    film = await film_factory(user)

    resp = await async_client.post(
        f"/films/{film.id}/poster",
        headers=headers,
        files={"poster": ("poster.jpg", b"\xff\xd8\xffjpeg", "image/jpeg")},
    )

    assert resp.status_code == 201, resp.text
    poster = resp.json()["poster_image"]
    assert (test_settings.UPLOAD_DIRECTORY / poster).exists()
    assert film.poster_image == poster

    served = await async_client.get(f"/upload/{poster}")
    assert served.status_code == 200
    assert served.content == b"\xff\xd8\xffjpeg"


@pytest.mark.anyio
async def test_non_owner_poster_upload_is_409(async_client: AsyncClient, user_with_headers, film_factory, test_settings):
    owner, _ = await user_with_headers(email="owner@example.com")
    _, headers = await user_with_headers(email="intruder@example.com")
    film = await film_factory(owner)

    resp = await async_client.post(
        f"/films/{film.id}/poster",
        headers=headers,
        files={"poster": ("poster.jpg", b"jpeg", "image/jpeg")},
    )

    assert resp.status_code == 409
    assert not (test_settings.UPLOAD_DIRECTORY).exists() or not any(test_settings.UPLOAD_DIRECTORY.iterdir())
