from __future__ import annotations

"""
Central enum definitions.

• All enums subclass `str, PyEnum` for JSON-friendly serialization.
• VALUE STRINGS are **stable** once stored (documents depend on them).
"""

from enum import Enum as PyEnum


class Genre(str, PyEnum):
    """Film genre as stored on the film document."""
    COMEDY = "comedy"
    CRIME = "crime"
    DOCUMENTARY = "documentary"
    DRAMA = "drama"
    HORROR = "horror"
    FAMILY = "family"
    ROMANCE = "romance"
    SCIFI = "scifi"
    THRILLER = "thriller"


__all__ = ["Genre"]
