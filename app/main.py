# app/main.py
"""
# What-to-Watch API — Application Entrypoint (FastAPI)

ASGI application factory and lifecycle for the film catalogue / watchlist
backend.

## Design Goals
- Deterministic, testable **app factory** (`create_app(container=None)`) with
  explicit lifespan. Tests inject a ready `Container` built from fakes.
- Explicit **middleware order**: 1) request id → 2) authentication.
- Centralized exception handling: every error leaves with one JSON shape.

## Probes
- `/healthz`: liveness (process up).
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

# -- Logging bootstrap (Loguru + stdlib intercept) ----------------------------
from app.core import logger as _logsetup  # noqa: F401

from app.api.routers import build_router
from app.core.config import Settings, settings
from app.core.container import Container
from app.core.exception_handlers import (
    app_exception_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.core.exceptions import AppException
from app.db.client import DatabaseClient
from app.middleware.authenticate import AuthenticateMiddleware
from app.middleware.request_id import RequestIDMiddleware

logger = logging.getLogger("app")


# ─────────────────────────────────────────────────────────────────────────────
# 🔄 Lifespan: startup & shutdown
# ─────────────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifecycle manager.

    Startup:
        - Connect MongoDB and build the container, unless one was injected.
        - Make sure the upload directory exists.

    Shutdown:
        - Disconnect the MongoDB client opened here.
    """
    cfg: Settings = app.state.settings
    logger.info("✅ What-to-Watch API starting on port %s", cfg.PORT)

    client: Optional[DatabaseClient] = None
    if getattr(app.state, "container", None) is None:
        client = DatabaseClient()
        await client.connect(cfg.MONGO_URI)
        app.state.container = Container.build(cfg, client)

    Path(app.state.container.settings.UPLOAD_DIRECTORY).mkdir(parents=True, exist_ok=True)

    try:
        yield
    finally:
        if client is not None:
            await client.disconnect()
        logger.info("🛑 What-to-Watch API shutting down")


# ─────────────────────────────────────────────────────────────────────────────
# 🏗️ App factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Build and configure the FastAPI app instance.

    Args:
        container: pre-wired services; when omitted the lifespan connects
            MongoDB and builds the production container.

    Returns:
        FastAPI: fully wired application with middleware, exception handlers,
        static mounts and resource routers.
    """
    cfg = container.settings if container is not None else settings

    # Docs toggles
    docs_url = "/docs" if cfg.ENABLE_DOCS else None
    redoc_url = "/redoc" if cfg.ENABLE_DOCS else None
    openapi_url = "/openapi.json" if cfg.ENABLE_DOCS else None

    app = FastAPI(
        title=cfg.PROJECT_NAME,
        version=cfg.VERSION,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.container = container

    # ── Middlewares (last added runs first) ─────────────────────────────────
    app.add_middleware(AuthenticateMiddleware, secret=cfg.JWT_SECRET.get_secret_value())  # 2) Identity
    app.add_middleware(RequestIDMiddleware)  # 1) Correlation ID

    # ── Exception handlers ──────────────────────────────────────────────────
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, global_exception_handler)

    # ── Static files ────────────────────────────────────────────────────────
    app.mount("/upload", StaticFiles(directory=str(cfg.UPLOAD_DIRECTORY), check_dir=False), name="upload")
    app.mount("/static", StaticFiles(directory=str(cfg.STATIC_DIRECTORY_PATH), check_dir=False), name="static")

    # ── Resource routers ────────────────────────────────────────────────────
    app.include_router(build_router())

    # ── Meta endpoints ──────────────────────────────────────────────────────
    @app.get("/healthz", tags=["meta"])
    async def healthz() -> dict:
        """Liveness probe: {"ok": True} while the process is responsive."""
        return {"ok": True}

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        return JSONResponse(
            {
                "message": "Hello from What-to-Watch!",
                "name": cfg.PROJECT_NAME,
                "version": cfg.VERSION,
                "docs": app.docs_url or "",
            }
        )

    return app


# ─────────────────────────────────────────────────────────────────────────────
# 🚀 Module-level ASGI app for Uvicorn
# ─────────────────────────────────────────────────────────────────────────────
app = create_app()
__all__ = ["create_app", "app", "lifespan"]


# Local dev runner (prefer: `uvicorn app.main:app --reload`)
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
