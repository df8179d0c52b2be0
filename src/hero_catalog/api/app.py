from __future__ import annotations

from fastapi import FastAPI

from hero_catalog.api.errors import install_error_handlers
from hero_catalog.api.lifespan import lifespan
from hero_catalog.api.middleware import PageLinkMiddleware
from hero_catalog.api.routes.comments import router as comments_router
from hero_catalog.api.routes.health import router as health_router
from hero_catalog.api.routes.heroes import router as heroes_router
from hero_catalog.api.routes.root import router as root_router
from hero_catalog.api.routes.search import router as search_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Hero Catalog API",
        description="Browse and search heroes and comment on them.",
        version="0.1.0",
        lifespan=lifespan,
    )

    install_error_handlers(app)

    # Page navigation headers for list endpoints
    app.add_middleware(PageLinkMiddleware)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(heroes_router)
    app.include_router(search_router)
    app.include_router(comments_router)

    return app
