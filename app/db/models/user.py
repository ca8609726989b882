from __future__ import annotations

"""
👤 What-to-Watch — User
=======================

Account document holding credentials and the avatar path.

• **Unique email** (single unique index).
• **Salted password hash** only; the plain password never reaches storage.
"""

from typing import Annotated

from beanie import Indexed

from app.core.security import get_password_hash, verify_password
from app.db.base_class import TimestampedDocument

DEFAULT_AVATAR_FILE_NAME = "default-avatar.jpg"


class User(TimestampedDocument):
    name: str
    email: Annotated[str, Indexed(unique=True)]
    avatar_path: str = DEFAULT_AVATAR_FILE_NAME
    password_hash: str = ""

    class Settings:
        name = "users"

    def set_password(self, password: str) -> None:
        self.password_hash = get_password_hash(password)

    def verify_password(self, password: str) -> bool:
        if not self.password_hash:
            return False
        return verify_password(password, self.password_hash)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<User id={self.id} email={self.email}>"
