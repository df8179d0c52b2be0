from fastapi import APIRouter, Depends, Query, Request, status

from hero_catalog.api.dependencies import get_store, valid_hero_id
from hero_catalog.api.pagination import remember_page
from hero_catalog.api.schemas import CommentCreateRequest, ErrorResponse
from hero_catalog.core.ports.store import HeroStore
from hero_catalog.core.query import MAX_PAGE
from hero_catalog.core.query import create_comment as _create_comment
from hero_catalog.core.query import list_comments as _list_comments
from hero_catalog.models import Comment

router = APIRouter(
    prefix="/heroes/{hero_id}/comments",
    tags=["comments"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=Comment, status_code=status.HTTP_201_CREATED)
async def create_comment(
    body: CommentCreateRequest,
    hero_id: str = Depends(valid_hero_id),
    store: HeroStore = Depends(get_store),
) -> Comment:
    return await _create_comment(store, hero_id, body.text)


@router.get("", response_model=list[Comment])
async def list_comments(
    request: Request,
    hero_id: str = Depends(valid_hero_id),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    store: HeroStore = Depends(get_store),
) -> list[Comment]:
    """Comments on a hero, newest first, three per page."""
    result = await _list_comments(store, hero_id, page)
    remember_page(request, result)
    return result.items
