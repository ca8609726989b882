# app/db/base_class.py
from __future__ import annotations

"""
# What-to-Watch — Beanie Document Base & Helpers

- `TimestampedDocument`: `created_at` / `updated_at` (UTC), maintained on
  insert/replace/save.
- `ref_id()`: id string of a reference, whether it is an unfetched `Link`,
  a populated document, a raw `ObjectId` or already a string.

Usage:
    from app.db.base_class import TimestampedDocument

    class Film(TimestampedDocument):
        title: str

        class Settings:
            name = "films"
"""

from datetime import datetime, timezone
from typing import Any, Optional

from beanie import Document, Insert, Replace, Save, before_event
from pydantic import Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedDocument(Document):
    """Document with server-maintained UTC timestamps."""

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @before_event(Insert)
    def _stamp_created(self) -> None:
        self.created_at = self.updated_at = utcnow()

    @before_event(Replace, Save)
    def _stamp_updated(self) -> None:
        self.updated_at = utcnow()


def ref_id(value: Any) -> Optional[str]:
    """Return the referenced document id as a string (None passes through)."""
    if value is None or isinstance(value, str):
        return value
    ref = getattr(value, "ref", None)  # beanie.Link → DBRef
    if ref is not None and getattr(ref, "id", None) is not None:
        return str(ref.id)
    inner = getattr(value, "id", None)  # populated document / DBRef
    if inner is not None:
        return str(inner)
    return str(value)


__all__ = ["TimestampedDocument", "ref_id", "utcnow"]
