from __future__ import annotations

"""
Exception filter.

Every error leaving a route is rendered with one JSON shape:

    {"error": true, "message": ..., "code": <status>, "component": ..., "request_id": ...}

`app.main.create_app` registers these handlers. Validation failures on typed
request bodies (DTOs) become **400** with a field-level `details` list.
"""

import logging
from collections import OrderedDict
from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppException, ValidationException
from app.middleware.request_id import get_request_id

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def validation_errors_to_details(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Group pydantic errors into ``[{"property", "value", "messages"}]`` (one entry per field)."""
    grouped: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
    for err in errors:
        loc = list(err.get("loc") or ())
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        prop = ".".join(str(p) for p in loc) or "body"
        entry = grouped.setdefault(
            prop,
            {
                "property": prop,
                "value": None if err.get("type") == "missing" else err.get("input"),
                "messages": [],
            },
        )
        entry["messages"].append(err.get("msg", "Invalid value"))
    return jsonable_encoder(list(grouped.values()))


def _render(exc: AppException, request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_problem(request_id=get_request_id(request) or None),
        headers=getattr(exc, "headers", None),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.error("[%s]: %s — %s", exc.component or "App", exc.status_code, exc.message)
    return _render(exc, request)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # type: ignore
    if isinstance(exc, AppException):
        return await app_exception_handler(request, exc)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    wrapped = AppException(status_code=exc.status_code, message=detail, headers=getattr(exc, "headers", None))
    logger.error("[Http]: %s — %s", exc.status_code, detail)
    return _render(wrapped, request)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # type: ignore
    details = validation_errors_to_details(list(exc.errors()))
    wrapped = ValidationException(f"Validation error: \"{request.url.path}\"", details)
    logger.error("[%s]: %s — %s", wrapped.component, wrapped.status_code, wrapped.message)
    return _render(wrapped, request)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # type: ignore
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": True,
            "message": "An unexpected error occurred.",
            "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "component": None,
            "request_id": get_request_id(request) or "N/A",
        },
    )


__all__ = [
    "validation_errors_to_details",
    "app_exception_handler",
    "http_exception_handler",
    "validation_exception_handler",
    "global_exception_handler",
]
