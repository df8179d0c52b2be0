from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint listing the available resources."""
    return {
        "meta": {
            "title": "Hero Catalog API",
            "description": "Browse and search heroes and comment on them.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "heroes": "/heroes",
            "search-by-name": "/search/heroes/by-name",
            "search-by-min-stats": "/search/heroes/by-min-stats",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
