from fastapi import APIRouter, Depends, Query, Request

from hero_catalog.api.dependencies import get_store, valid_hero_id
from hero_catalog.api.pagination import remember_page
from hero_catalog.api.schemas import ErrorResponse
from hero_catalog.core.ports.store import HeroStore
from hero_catalog.core.query import MAX_PAGE
from hero_catalog.core.query import get_hero as _get_hero
from hero_catalog.core.query import list_heroes as _list_heroes
from hero_catalog.models import Hero

router = APIRouter(prefix="/heroes", tags=["heroes"])


@router.get("", response_model=list[Hero])
async def list_heroes(
    request: Request,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    store: HeroStore = Depends(get_store),
) -> list[Hero]:
    """All heroes sorted by name, ten per page."""
    result = await _list_heroes(store, page)
    remember_page(request, result)
    return result.items


@router.get(
    "/{hero_id}",
    response_model=Hero,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_hero(
    hero_id: str = Depends(valid_hero_id),
    store: HeroStore = Depends(get_store),
) -> Hero:
    return await _get_hero(store, hero_id)
