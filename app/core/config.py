# app/core/config.py
from __future__ import annotations

"""
# What-to-Watch — Centralized Configuration (Pydantic v2)

Single `settings` object with strongly-typed, environment-driven config.

## Goals
- Safe defaults for local/dev; explicit where prod needs secrets (`JWT_SECRET`).
- Mongo connection URI assembled from discrete `DB_*` variables.
- Upload/static directories resolved once, used by both the app factory and
  the upload dependency.

## Usage
    from app.core.config import settings
"""

import logging
from pathlib import Path
from typing import Literal
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)
load_dotenv()  # harmless in prod; convenient in dev


# ─────────────────────────────────────────────────────────────
# Small helpers
# ─────────────────────────────────────────────────────────────
def build_mongo_uri(
    user: str | None,
    password: str | None,
    host: str,
    port: int,
    database: str,
) -> str:
    """Return a `mongodb://` URI; credentials are URL-quoted and optional."""
    credentials = ""
    if user:
        credentials = f"{quote_plus(user)}:{quote_plus(password or '')}@"
    return f"mongodb://{credentials}{host}:{port}/{database}?authSource=admin"


# ─────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────
class Settings(BaseSettings):
    """
    Global application settings sourced from environment.

    Security:
        - `JWT_SECRET` has no default; the process refuses to start without it.

    Notes:
        - Prefer the derived properties (`MONGO_URI`, `server_url`) when
          composing URLs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # don't crash on unknown keys
    )

    # ── App meta ──────────────────────────────────────────────
    PROJECT_NAME: str = "What-to-Watch API"
    VERSION: str = "1.0.0"
    ENV: Literal["development", "staging", "production"] = "development"
    ENABLE_DOCS: bool = True

    # ── Server ────────────────────────────────────────────────
    PORT: int = Field(4000, ge=1, le=65535)
    HOST: str = "localhost"

    # ── Database (MongoDB) ────────────────────────────────────
    DB_USER: str = ""
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = Field(27017, ge=1, le=65535)
    DB_NAME: str = "what-to-watch"

    # ── Security / JWT ────────────────────────────────────────
    JWT_SECRET: SecretStr = Field(...)
    JWT_ALGORITHM: Literal["HS256", "HS384", "HS512"] = "HS256"
    JWT_EXPIRES_IN_MINUTES: int = Field(2 * 24 * 60, ge=5, le=30 * 24 * 60)

    # ── Files ─────────────────────────────────────────────────
    UPLOAD_DIRECTORY: Path = Path("upload")
    STATIC_DIRECTORY_PATH: Path = Path("static")

    # ── Validators / normalizers ──────────────────────────────
    @field_validator("HOST", "DB_HOST", "DB_NAME", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return str(v).strip() if v is not None else v

    # ── Derived / convenience properties ─────────────────────
    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "production"

    @property
    def MONGO_URI(self) -> str:
        return build_mongo_uri(
            self.DB_USER,
            self.DB_PASSWORD.get_secret_value(),
            self.DB_HOST,
            self.DB_PORT,
            self.DB_NAME,
        )

    @property
    def server_url(self) -> str:
        """Base URL the server listens on, e.g. `http://localhost:4000`."""
        return f"http://{self.HOST}:{self.PORT}"


# Singleton instance
settings = Settings()
