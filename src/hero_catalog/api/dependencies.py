from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Path

from hero_catalog.core.ports.store import HeroStore
from hero_catalog.core.query import validate_hero_id
from hero_catalog.db.engine import get_client, get_database_name
from hero_catalog.db.mongo import MongoHeroStore

_store: MongoHeroStore | None = None


async def get_store() -> AsyncIterator[HeroStore]:
    """Yield a ``HeroStore`` instance, creating it lazily on first call."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = MongoHeroStore(get_client(), get_database_name())
    yield _store


async def shutdown_store() -> None:
    global _store  # noqa: PLW0603
    if _store is not None:
        await _store.dispose()
        _store = None


def valid_hero_id(hero_id: str = Path(..., description="Hero ObjectId as 24 hex characters.")) -> str:
    """Reject malformed identifiers before any store call is made."""
    return validate_hero_id(hero_id)
