"""ASGI middleware for injecting page navigation headers into list responses."""

from __future__ import annotations

from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hero_catalog.api.pagination import build_link_header


class PageLinkMiddleware(BaseHTTPMiddleware):
    """Adds ``X-Page``, ``X-Page-Size`` and ``Link`` headers to paginated responses."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)

        pagination_state: dict[str, Any] | None = getattr(request.state, "page_pagination", None)
        if pagination_state is None or response.status_code != 200:
            return response

        number = pagination_state["number"]
        response.headers["X-Page"] = str(number)
        response.headers["X-Page-Size"] = str(pagination_state["size"])
        link = build_link_header(
            request.url,
            number,
            has_next=pagination_state["has_next"],
            has_prev=pagination_state["has_prev"],
        )
        if link is not None:
            response.headers["Link"] = link
        return response
