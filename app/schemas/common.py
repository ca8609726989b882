from __future__ import annotations

"""
Shared DTO helpers.

`fill_dto(Response, record)` shapes any record (beanie document, populated
link, or plain object) into a response model, exposing only declared fields.
"""

from typing import Annotated, Any, Iterable, List, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict

from app.db.base_class import ref_id

T = TypeVar("T", bound=BaseModel)

# Accepts ObjectId, Link, populated document or str; always serialized as str.
IdStr = Annotated[str, BeforeValidator(ref_id)]


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


def fill_dto(schema: Type[T], record: Any) -> T:
    return schema.model_validate(record, from_attributes=True)


def fill_dto_list(schema: Type[T], records: Iterable[Any]) -> List[T]:
    return [fill_dto(schema, r) for r in records]


__all__ = ["IdStr", "ResponseModel", "fill_dto", "fill_dto_list"]
