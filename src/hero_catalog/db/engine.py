import os

from pymongo import AsyncMongoClient


def get_database_name() -> str:
    return os.getenv("MONGODB_DATABASE", "hero_catalog")


def get_client() -> AsyncMongoClient:
    url = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
    timeout_ms = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))
    return AsyncMongoClient(url, tz_aware=True, serverSelectionTimeoutMS=timeout_ms)
