import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from hero_catalog.core.errors import HeroNotFoundError, InvalidIdentifierError
from hero_catalog.core.ports.store import HeroStore, SortSpec
from hero_catalog.models import Comment, Hero

logger = logging.getLogger(__name__)

HEROES_PER_PAGE = 10
COMMENTS_PER_PAGE = 3

# Largest page whose skip still fits in a signed 64-bit BSON integer
MAX_PAGE = (2**63 - 1) // max(HEROES_PER_PAGE, COMMENTS_PER_PAGE)

STAT_FIELDS = ("intelligence", "strength", "speed", "durability", "power", "combat")

# _id breaks ties between equal names so page windows never overlap
HERO_SORT: SortSpec = (("name", ASCENDING), ("_id", ASCENDING))
COMMENT_SORT: SortSpec = (("createdAt", DESCENDING), ("_id", DESCENDING))

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    number: int
    size: int
    has_next: bool

    @property
    def has_prev(self) -> bool:
        return self.number > 1


def page_window(page: int, size: int) -> tuple[int, int]:
    """Return ``(skip, limit)`` for a 1-based page number."""
    if page < 1:
        raise ValueError(f"Page numbers start at 1, got {page}")
    if page > MAX_PAGE:
        raise ValueError(f"Page numbers stop at {MAX_PAGE}, got {page}")
    return (page - 1) * size, size


def validate_hero_id(hero_id: str) -> str:
    if not ObjectId.is_valid(hero_id):
        raise InvalidIdentifierError(hero_id)
    return hero_id


def name_prefix_filter(query: str) -> dict[str, Any]:
    """Case-insensitive match on names starting with ``query``, taken literally."""
    return {"name": {"$regex": f"^{re.escape(query)}", "$options": "i"}}


def min_stats_filter(stats: Mapping[str, float]) -> dict[str, Any]:
    """Require every powerstat to be >= its threshold; missing thresholds are 0."""
    return {f"powerstats.{field}": {"$gte": stats.get(field) or 0} for field in STAT_FIELDS}


async def _find_hero_page(
    database: HeroStore,
    filter: Mapping[str, Any],
    page: int,
) -> Page[Hero]:
    skip, limit = page_window(page, HEROES_PER_PAGE)
    # One extra row tells us whether another page follows
    rows = await database.find_heroes(filter, HERO_SORT, skip=skip, limit=limit + 1)
    return Page(items=rows[:limit], number=page, size=limit, has_next=len(rows) > limit)


async def list_heroes(database: HeroStore, page: int = 1) -> Page[Hero]:
    return await _find_hero_page(database, {}, page)


async def get_hero(database: HeroStore, hero_id: str) -> Hero:
    hero = await database.get_hero(validate_hero_id(hero_id))
    if hero is None:
        raise HeroNotFoundError(hero_id)
    return hero


async def search_heroes_by_name(database: HeroStore, query: str, page: int = 1) -> Page[Hero]:
    return await _find_hero_page(database, name_prefix_filter(query), page)


async def search_heroes_by_min_stats(
    database: HeroStore,
    stats: Mapping[str, float],
    page: int = 1,
) -> Page[Hero]:
    return await _find_hero_page(database, min_stats_filter(stats), page)


async def _require_hero(database: HeroStore, hero_id: str) -> None:
    if not await database.hero_exists(validate_hero_id(hero_id)):
        raise HeroNotFoundError(hero_id)


async def create_comment(database: HeroStore, hero_id: str, text: str) -> Comment:
    """Attach a comment to an existing hero.

    Raises ``HeroNotFoundError`` without writing anything when the hero is absent.
    """
    await _require_hero(database, hero_id)
    comment = await database.insert_comment(hero_id, text)
    logger.info("Created comment %s for hero %s", comment.id, hero_id)
    return comment


async def list_comments(database: HeroStore, hero_id: str, page: int = 1) -> Page[Comment]:
    await _require_hero(database, hero_id)
    skip, limit = page_window(page, COMMENTS_PER_PAGE)
    rows = await database.find_comments(hero_id, COMMENT_SORT, skip=skip, limit=limit + 1)
    return Page(items=rows[:limit], number=page, size=limit, has_next=len(rows) > limit)
