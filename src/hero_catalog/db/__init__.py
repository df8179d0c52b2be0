from hero_catalog.db.engine import get_client, get_database_name
from hero_catalog.db.helpers import (
    COMMENTS_COLLECTION,
    HEROES_COLLECTION,
    to_object_id,
)
from hero_catalog.db.memory import InMemoryHeroStore
from hero_catalog.db.mongo import MongoHeroStore

__all__ = [
    "COMMENTS_COLLECTION",
    "HEROES_COLLECTION",
    "InMemoryHeroStore",
    "MongoHeroStore",
    "get_client",
    "get_database_name",
    "to_object_id",
]
