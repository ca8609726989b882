# tests/fixtures/fakes.py

"""
🧪 In-memory ODM fakes
======================

Stand-ins for the beanie document classes, implementing only the slice of the
beanie API the services use:

- class side: `get(id, fetch_links=)`, `find_one(query)`, `find(query)`
  → `.sort()`, `.limit()`, `.to_list()`, `.delete()`
- instance side: `insert()`, `save()`, `delete()`, `fetch_link()`,
  `fetch_all_links()`

References are stored as `bson.DBRef` exactly as the services create them and
resolved through `REGISTRY` by collection name. Queries support equality and
`"<field>.$id"` reference matches.

Services are constructed with these classes, so tests exercise the real
service code without a database.
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, ClassVar, Dict, List, Optional

from beanie import PydanticObjectId
from bson import DBRef

from app.core.security import get_password_hash, verify_password
from app.db.base_class import ref_id

REGISTRY: Dict[str, type] = {}


def _matches(doc: Any, query: Dict[str, Any]) -> bool:
    for key, expected in query.items():
        if key.endswith(".$id"):
            if ref_id(getattr(doc, key[: -len(".$id")], None)) != str(expected):
                return False
        elif getattr(doc, key, None) != expected:
            return False
    return True


class FakeQuery:
    def __init__(self, model: type, query: Dict[str, Any]) -> None:
        self.model = model
        self.query = query
        self._sort: Optional[str] = None
        self._limit: Optional[int] = None

    def sort(self, key: str) -> "FakeQuery":
        self._sort = key
        return self

    def limit(self, n: int) -> "FakeQuery":
        self._limit = n
        return self

    def _docs(self) -> List[Any]:
        return [d for d in self.model.store.values() if _matches(d, self.query)]

    async def to_list(self) -> List[Any]:
        docs = self._docs()
        if self._sort:
            field = self._sort.lstrip("-+")
            docs.sort(key=lambda d: getattr(d, field), reverse=self._sort.startswith("-"))
        if self._limit is not None:
            docs = docs[: self._limit]
        return docs

    async def delete(self) -> SimpleNamespace:
        docs = self._docs()
        for doc in docs:
            self.model.store.pop(str(doc.id), None)
        return SimpleNamespace(deleted_count=len(docs))


class FakeDocument:
    collection: ClassVar[str] = ""
    defaults: ClassVar[Dict[str, Any]] = {}
    store: ClassVar[Dict[str, Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.store = {}
        REGISTRY[cls.collection] = cls

    def __init__(self, **fields: Any) -> None:
        self.id: Optional[PydanticObjectId] = None
        for key, value in {**self.defaults, **fields}.items():
            setattr(self, key, value)

    # ── instance API ──────────────────────────────────────────
    async def insert(self) -> "FakeDocument":
        self.id = PydanticObjectId()
        self.created_at = self.updated_at = datetime.now(timezone.utc)
        type(self).store[str(self.id)] = self
        return self

    async def save(self) -> "FakeDocument":
        self.updated_at = datetime.now(timezone.utc)
        type(self).store[str(self.id)] = self
        return self

    async def delete(self) -> None:
        type(self).store.pop(str(self.id), None)

    async def fetch_link(self, field: str) -> None:
        value = getattr(self, field, None)
        if not isinstance(value, DBRef):
            return
        target = REGISTRY[value.collection].store.get(str(value.id))
        if target is not None:
            setattr(self, field, target)

    async def fetch_all_links(self) -> None:
        for field, value in list(vars(self).items()):
            if isinstance(value, DBRef):
                await self.fetch_link(field)

    # ── class API ─────────────────────────────────────────────
    @classmethod
    async def get(cls, document_id: Any, fetch_links: bool = False) -> Optional["FakeDocument"]:
        doc = cls.store.get(str(document_id))
        if doc is not None and fetch_links:
            await doc.fetch_all_links()
        return doc

    @classmethod
    async def find_one(cls, query: Dict[str, Any]) -> Optional["FakeDocument"]:
        for doc in cls.store.values():
            if _matches(doc, query):
                return doc
        return None

    @classmethod
    def find(cls, query: Dict[str, Any]) -> FakeQuery:
        return FakeQuery(cls, query)


class FakeUser(FakeDocument):
    collection = "users"
    defaults = {"avatar_path": "default-avatar.jpg", "password_hash": ""}

    def set_password(self, password: str) -> None:
        self.password_hash = get_password_hash(password)

    def verify_password(self, password: str) -> bool:
        return bool(self.password_hash) and verify_password(password, self.password_hash)


class FakeFilm(FakeDocument):
    collection = "films"
    defaults = {"rating": 0.0, "comments_count": 0}


class FakeComment(FakeDocument):
    collection = "comments"


class FakeWatchlistEntry(FakeDocument):
    collection = "watchlist"


class FakePromoFilm(FakeDocument):
    collection = "promo"


FAKE_MODELS = (FakeUser, FakeFilm, FakeComment, FakeWatchlistEntry, FakePromoFilm)


def reset_stores() -> None:
    for model in FAKE_MODELS:
        model.store.clear()


def film_payload(**overrides: Any) -> Dict[str, Any]:
    """A valid `CreateFilmDto` body."""
    payload = {
        "title": "The Grand Budapest Hotel",
        "description": "A concierge and his lobby boy get caught up in a murder mystery.",
        "published_at": "2024-03-01T12:00:00Z",
        "genre": "comedy",
        "released": 2014,
        "preview_video_path": "https://videos.example.com/budapest-preview.mp4",
        "video_path": "https://videos.example.com/budapest.mp4",
        "actors": ["Ralph Fiennes", "Tony Revolori"],
        "director": "Wes Anderson",
        "duration": 99,
        "poster_image": "budapest.jpg",
        "background_image": "budapest-bg.jpg",
        "background_color": "#D8CDB4",
    }
    payload.update(overrides)
    return payload


def user_ref(user: Any) -> DBRef:
    return DBRef("users", user.id)


def film_ref(film: Any) -> DBRef:
    return DBRef("films", film.id)


__all__ = [
    "REGISTRY",
    "FakeQuery",
    "FakeDocument",
    "FakeUser",
    "FakeFilm",
    "FakeComment",
    "FakeWatchlistEntry",
    "FakePromoFilm",
    "FAKE_MODELS",
    "reset_stores",
    "film_payload",
    "user_ref",
    "film_ref",
]
