from fastapi import APIRouter, Depends, Response, status

from hero_catalog.api.dependencies import get_store
from hero_catalog.api.schemas import HealthResponse, ReadinessResponse
from hero_catalog.core.ports.store import HeroStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    store: HeroStore = Depends(get_store),
) -> ReadinessResponse:
    """Readiness probe: checks MongoDB connectivity."""
    if await store.ping():
        return ReadinessResponse(status="ok", database="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", database="down")
