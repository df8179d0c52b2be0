"""Dictionary-backed store that evaluates the same filter documents as MongoDB.

Only the operators the query layer emits are understood: plain equality,
``$gte`` and ``$regex``/``$options``, on top-level or dotted field paths.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from bson import ObjectId

from hero_catalog.core.ports.store import SortSpec
from hero_catalog.db.helpers import (
    comment_from_document,
    hero_from_document,
    stamp_timestamps,
    to_object_id,
)
from hero_catalog.models import Comment, Hero

_MISSING = object()


def _lookup(document: Mapping[str, Any], path: str) -> Any:
    value: Any = document
    for part in path.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _regex_flags(options: str) -> int:
    flags = 0
    if "i" in options:
        flags |= re.IGNORECASE
    if "m" in options:
        flags |= re.MULTILINE
    if "s" in options:
        flags |= re.DOTALL
    return flags


def _matches_condition(value: Any, condition: Any) -> bool:
    if not (isinstance(condition, Mapping) and condition and all(k.startswith("$") for k in condition)):
        return value is not _MISSING and value == condition

    for op, operand in condition.items():
        if op == "$gte":
            if isinstance(value, bool) or not isinstance(value, int | float) or value < operand:
                return False
        elif op == "$regex":
            flags = _regex_flags(condition.get("$options", ""))
            if not isinstance(value, str) or re.search(operand, value, flags) is None:
                return False
        elif op == "$options":
            continue
        else:
            raise ValueError(f"Unsupported query operator: {op}")
    return True


def matches(document: Mapping[str, Any], filter: Mapping[str, Any]) -> bool:
    return all(_matches_condition(_lookup(document, path), cond) for path, cond in filter.items())


def _sort_key(value: Any) -> tuple[int, Any]:
    # Missing fields sort before present ones, as in MongoDB
    if value is _MISSING or value is None:
        return (0, 0)
    return (1, value)


def sort_documents(documents: Iterable[Mapping[str, Any]], sort: SortSpec) -> list[Mapping[str, Any]]:
    ordered = list(documents)
    for path, direction in reversed(list(sort)):
        ordered.sort(key=lambda d, p=path: _sort_key(_lookup(d, p)), reverse=direction < 0)
    return ordered


def _window(documents: list[Mapping[str, Any]], skip: int, limit: int) -> list[Mapping[str, Any]]:
    end = skip + limit if limit > 0 else None
    return documents[skip:end]


class InMemoryHeroStore:
    def __init__(self) -> None:
        self.heroes: dict[ObjectId, dict[str, Any]] = {}
        self.comments: dict[ObjectId, dict[str, Any]] = {}
        self.indexes: set[tuple[str, tuple[tuple[str, int], ...]]] = set()

    async def find_heroes(
        self,
        filter: Mapping[str, Any],
        sort: SortSpec,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Hero]:
        selected = [d for d in self.heroes.values() if matches(d, filter)]
        return [hero_from_document(d) for d in _window(sort_documents(selected, sort), skip, limit)]

    async def get_hero(self, hero_id: str) -> Hero | None:
        document = self.heroes.get(to_object_id(hero_id))
        return hero_from_document(document) if document is not None else None

    async def hero_exists(self, hero_id: str) -> bool:
        return to_object_id(hero_id) in self.heroes

    async def insert_hero(self, document: Mapping[str, Any]) -> str:
        stamped = stamp_timestamps(document)
        oid = stamped.setdefault("_id", ObjectId())
        self.heroes[oid] = stamped
        return str(oid)

    async def insert_comment(self, hero_id: str, text: str) -> Comment:
        oid = ObjectId()
        document = stamp_timestamps({"_id": oid, "hero": to_object_id(hero_id), "text": text})
        self.comments[oid] = document
        return comment_from_document(document)

    async def find_comments(
        self,
        hero_id: str,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Comment]:
        selected = [d for d in self.comments.values() if matches(d, {"hero": to_object_id(hero_id)})]
        return [comment_from_document(d) for d in _window(sort_documents(selected, sort), skip, limit)]

    async def ensure_indexes(self) -> None:
        self.indexes.add(("heroes", (("name", 1), ("_id", 1))))
        self.indexes.add(("comments", (("hero", 1), ("createdAt", -1), ("_id", -1))))

    async def ping(self) -> bool:
        return True

    async def dispose(self) -> None:
        pass
