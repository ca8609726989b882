# app/core/exceptions.py
from __future__ import annotations

"""
What-to-Watch — Application Exceptions
======================================
A small, consistent layer on top of FastAPI/Starlette's `HTTPException` that
tags every error with the component that raised it and renders the JSON error
shape used by `app.core.exception_handlers`.

Key ideas
---------
- One base `AppException` carrying `message`, `component`, `details`.
- Status-specific subclasses (400/401/404/409) with sane defaults.
- `to_problem()` renders the canonical body.

Usage
-----
    raise NotFoundException(f"Film with id {film_id} not found.", component="CommentController")
"""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status

__all__ = [
    "AppException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
]


# ──────────────────────────────────────────────────────────────
# 📦 Core: AppException
# ──────────────────────────────────────────────────────────────
class AppException(HTTPException):
    """Base application-level exception.

    Attributes
    -----------
    status_code : int
        HTTP status code.
    message : str
        Human-readable error message (also serialized as `detail`).
    component : str | None
        Name of the originating component, e.g. ``"CheckUserMiddleware"``.
    details : Any
        Machine-readable details (e.g. the field-level validation list).
    """

    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        component: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.message: str = message
        self.component: Optional[str] = component
        self.details: Optional[Any] = details

    def to_problem(self, *, request_id: Optional[str] = None) -> Dict[str, Any]:
        """Return a dict matching our JSON error shape."""
        body: Dict[str, Any] = {
            "error": True,
            "message": self.message,
            "code": self.status_code,
            "component": self.component,
            "request_id": request_id or "N/A",
        }
        if self.details is not None:
            body["details"] = self.details
        return body


# ──────────────────────────────────────────────────────────────
# 🧱 Status-specific exceptions
# ──────────────────────────────────────────────────────────────
class BadRequestException(AppException):
    def __init__(self, message: str, *, component: Optional[str] = None, details: Optional[Any] = None) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            component=component,
            details=details,
        )


class UnauthorizedException(AppException):
    """Raised when a private route is hit without a valid identity (401)."""

    def __init__(self, message: str = "Unauthorized", *, component: Optional[str] = None) -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=message,
            component=component,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundException(AppException):
    def __init__(self, message: str, *, component: Optional[str] = None) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message, component=component)


class ConflictException(AppException):
    def __init__(self, message: str, *, component: Optional[str] = None) -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, message=message, component=component)


class ValidationException(BadRequestException):
    """400 carrying a list of ``{"property", "value", "messages"}`` entries."""

    def __init__(self, message: str, errors: List[Dict[str, Any]], *, component: Optional[str] = None) -> None:
        super().__init__(message, component=component or "ValidateDtoMiddleware", details=errors)
        self.errors = errors
