from __future__ import annotations

"""
What-to-Watch — MongoDB client

One `AsyncIOMotorClient` per process, opened at startup by the app lifespan
and handed to beanie together with every document model. The URI is built
from config (`settings.MONGO_URI`). No retries: a failed connect aborts
startup.
"""

from typing import Optional
import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.db.models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)


class DatabaseClient:
    def __init__(self) -> None:
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("Database client is not connected")
        return self._database

    async def connect(self, uri: str) -> None:
        if self._client is not None:
            raise RuntimeError("MongoDB client already connected")

        logger.info("Trying to connect to MongoDB…")
        client = AsyncIOMotorClient(uri, tz_aware=True)
        database = client.get_default_database()
        try:
            await init_beanie(database=database, document_models=DOCUMENT_MODELS)
        except Exception:
            client.close()
            logger.exception("Failed to connect to the database")
            raise

        self._client, self._database = client, database
        logger.info("Database connection established.")

    async def disconnect(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = self._database = None
        logger.info("Database connection closed.")

    async def ping(self) -> bool:
        if self._database is None:
            return False
        try:
            await self._database.command("ping")
            return True
        except Exception:
            logger.exception("MongoDB ping failed")
            return False


__all__ = ["DatabaseClient"]
