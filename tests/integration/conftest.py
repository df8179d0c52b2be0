"""Session-scoped fixtures for integration tests."""

import uuid
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from pymongo import AsyncMongoClient
from testcontainers.mongodb import MongoDbContainer

from hero_catalog.db import MongoHeroStore

_MONGO_IMAGE = "mongo:7.0"


@pytest.fixture(scope="session")
def mongo_container() -> Generator[MongoDbContainer, None, None]:
    """Start a MongoDB container for the session."""
    container = MongoDbContainer(_MONGO_IMAGE)
    container.start()
    yield container
    container.stop()


@pytest.fixture(scope="session")
def test_mongo_url(mongo_container: MongoDbContainer) -> str:
    return mongo_container.get_connection_url()


@pytest_asyncio.fixture
async def db(test_mongo_url: str) -> AsyncGenerator[MongoHeroStore, None]:
    """Per-test store on a throwaway database so tests never share documents."""
    client: AsyncMongoClient = AsyncMongoClient(test_mongo_url, tz_aware=True)
    database_name = f"hero_catalog_test_{uuid.uuid4().hex[:8]}"
    instance = MongoHeroStore(client, database_name)
    await instance.ensure_indexes()
    yield instance
    await client.drop_database(database_name)
    await instance.dispose()
