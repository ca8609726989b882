# tests/fixtures/app.py

"""
🧩 App Fixture:
- Builds a `Container` of real services over the in-memory ODM fakes
- Creates the FastAPI app through the production factory
- Returns HTTP client fixtures for integration tests
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.core.container import Container
from app.main import create_app
from app.services.comment_service import CommentService
from app.services.film_service import FilmService
from app.services.promo_film_service import PromoFilmService
from app.services.user_service import UserService
from app.services.watchlist_service import WatchlistService
from tests.fixtures.fakes import (
    FakeComment,
    FakeFilm,
    FakePromoFilm,
    FakeUser,
    FakeWatchlistEntry,
    reset_stores,
)

TEST_SECRET = "test-secret-key"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    """Settings with uploads redirected into the per-test temp dir."""
    return Settings(
        JWT_SECRET=TEST_SECRET,
        UPLOAD_DIRECTORY=tmp_path / "upload",
        STATIC_DIRECTORY_PATH=tmp_path / "static",
    )


@pytest.fixture()
def container(test_settings: Settings) -> Container:
    """
    🧪 Real services wired over the fakes. Stores are emptied per test.
    """
    reset_stores()
    yield Container(
        settings=test_settings,
        user_service=UserService(FakeUser),
        film_service=FilmService(FakeFilm),
        comment_service=CommentService(FakeComment),
        watchlist_service=WatchlistService(FakeWatchlistEntry),
        promo_film_service=PromoFilmService(FakePromoFilm),
    )
    reset_stores()


@pytest.fixture()
def app(container: Container) -> FastAPI:
    return create_app(container)


@pytest.fixture()
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    🌐 Provides an HTTP client for sending requests to the test app.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
