"""Page-number pagination helpers shared by the list endpoints.

List bodies stay plain JSON arrays; navigation is exposed through an RFC 8288
``Link`` header built from the state the handlers leave on the request.
"""

from __future__ import annotations

from typing import Any

from starlette.datastructures import URL
from starlette.requests import Request

from hero_catalog.core.query import Page


def remember_page(request: Request, page: Page[Any]) -> None:
    """Store pagination state on the request for ``PageLinkMiddleware``."""
    request.state.page_pagination = {
        "number": page.number,
        "size": page.size,
        "has_next": page.has_next,
        "has_prev": page.has_prev,
    }


def build_link_header(url: URL, number: int, has_next: bool, has_prev: bool) -> str | None:
    links: list[str] = []
    if has_next:
        links.append(f'<{url.include_query_params(page=number + 1)}>; rel="next"')
    if has_prev:
        links.append(f'<{url.include_query_params(page=number - 1)}>; rel="prev"')
    return ", ".join(links) or None
