from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from hero_catalog.models import Comment, Hero

SortSpec = Sequence[tuple[str, int]]


class HeroStore(Protocol):
    async def find_heroes(
        self,
        filter: Mapping[str, Any],
        sort: SortSpec,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Hero]: ...

    async def get_hero(self, hero_id: str) -> Hero | None: ...

    async def hero_exists(self, hero_id: str) -> bool: ...

    async def insert_hero(self, document: Mapping[str, Any]) -> str: ...

    async def insert_comment(self, hero_id: str, text: str) -> Comment: ...

    async def find_comments(
        self,
        hero_id: str,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Comment]: ...

    async def ensure_indexes(self) -> None: ...

    async def ping(self) -> bool: ...

    async def dispose(self) -> None: ...
