import contextlib
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pymongo import ASCENDING, DESCENDING, AsyncMongoClient
from pymongo.errors import PyMongoError

from hero_catalog.core.errors import StoreUnavailableError
from hero_catalog.core.ports.store import SortSpec
from hero_catalog.db.helpers import (
    COMMENTS_COLLECTION,
    HEROES_COLLECTION,
    comment_from_document,
    hero_from_document,
    stamp_timestamps,
    to_object_id,
)
from hero_catalog.models import Comment, Hero

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        logger.error("MongoDB %s failed: %s", operation, exc)
        raise StoreUnavailableError(f"Document store failed during {operation}") from exc


class MongoHeroStore:
    def __init__(self, client: AsyncMongoClient, database_name: str) -> None:
        self._client = client
        database = client[database_name]
        self._heroes = database[HEROES_COLLECTION]
        self._comments = database[COMMENTS_COLLECTION]

    async def find_heroes(
        self,
        filter: Mapping[str, Any],
        sort: SortSpec,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Hero]:
        with _store_errors("find_heroes"):
            cursor = self._heroes.find(dict(filter)).sort(list(sort)).skip(skip).limit(limit)
            documents = await cursor.to_list()
        return [hero_from_document(d) for d in documents]

    async def get_hero(self, hero_id: str) -> Hero | None:
        oid = to_object_id(hero_id)
        with _store_errors("get_hero"):
            document = await self._heroes.find_one({"_id": oid})
        return hero_from_document(document) if document is not None else None

    async def hero_exists(self, hero_id: str) -> bool:
        oid = to_object_id(hero_id)
        with _store_errors("hero_exists"):
            count = await self._heroes.count_documents({"_id": oid}, limit=1)
        return count > 0

    async def insert_hero(self, document: Mapping[str, Any]) -> str:
        stamped = stamp_timestamps(document)
        with _store_errors("insert_hero"):
            result = await self._heroes.insert_one(stamped)
        return str(result.inserted_id)

    async def insert_comment(self, hero_id: str, text: str) -> Comment:
        document = stamp_timestamps({"hero": to_object_id(hero_id), "text": text})
        with _store_errors("insert_comment"):
            result = await self._comments.insert_one(document)
        document["_id"] = result.inserted_id
        return comment_from_document(document)

    async def find_comments(
        self,
        hero_id: str,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Comment]:
        oid = to_object_id(hero_id)
        with _store_errors("find_comments"):
            cursor = self._comments.find({"hero": oid}).sort(list(sort)).skip(skip).limit(limit)
            documents = await cursor.to_list()
        return [comment_from_document(d) for d in documents]

    async def ensure_indexes(self) -> None:
        with _store_errors("ensure_indexes"):
            await self._heroes.create_index([("name", ASCENDING), ("_id", ASCENDING)])
            await self._comments.create_index(
                [("hero", ASCENDING), ("createdAt", DESCENDING), ("_id", DESCENDING)]
            )
        logger.info("Ensured indexes on %s and %s", HEROES_COLLECTION, COMMENTS_COLLECTION)

    async def ping(self) -> bool:
        try:
            await self._client.admin.command("ping")
        except PyMongoError as exc:
            logger.warning("MongoDB ping failed: %s", exc)
            return False
        return True

    async def dispose(self) -> None:
        await self._client.close()
