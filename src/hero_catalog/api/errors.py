"""Translate domain and validation errors into JSON error responses.

Every error body has the shape ``{"detail": ..., "kind": ...}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hero_catalog.core.errors import (
    HeroCatalogError,
    HeroNotFoundError,
    InvalidIdentifierError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[HeroCatalogError], int] = {
    InvalidIdentifierError: status.HTTP_400_BAD_REQUEST,
    HeroNotFoundError: status.HTTP_404_NOT_FOUND,
    StoreUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: HeroCatalogError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in _STATUS_CODES:
            return _STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_catalog_error(request: Request, exc: HeroCatalogError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "kind": exc.kind})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors()), "kind": "validation"},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HeroCatalogError, handle_catalog_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
