from fastapi import APIRouter, Depends, Query, Request

from hero_catalog.api.dependencies import get_store
from hero_catalog.api.pagination import remember_page
from hero_catalog.api.schemas import MinStatsRequest, NameSearchRequest
from hero_catalog.core.ports.store import HeroStore
from hero_catalog.core.query import MAX_PAGE, search_heroes_by_min_stats, search_heroes_by_name
from hero_catalog.models import Hero

router = APIRouter(prefix="/search/heroes", tags=["search"])


@router.post("/by-name", response_model=list[Hero])
async def by_name(
    request: Request,
    body: NameSearchRequest,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    store: HeroStore = Depends(get_store),
) -> list[Hero]:
    """Heroes whose name starts with ``query``, ignoring case, sorted by name."""
    result = await search_heroes_by_name(store, body.query, page)
    remember_page(request, result)
    return result.items


@router.post("/by-min-stats", response_model=list[Hero])
async def by_min_stats(
    request: Request,
    body: MinStatsRequest | None = None,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    store: HeroStore = Depends(get_store),
) -> list[Hero]:
    """Heroes whose powerstats are all at least the given values."""
    stats = (body or MinStatsRequest()).model_dump()
    result = await search_heroes_by_min_stats(store, stats, page)
    remember_page(request, result)
    return result.items
