from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request bodies ---


class NameSearchRequest(BaseModel):
    """POST /search/heroes/by-name: heroes whose name starts with ``query``."""

    # MongoDB refuses regular expressions containing NUL
    query: str = Field(..., pattern=r"^[^\x00]*$")


class MinStatsRequest(BaseModel):
    """POST /search/heroes/by-min-stats: omitted stats impose no constraint."""

    intelligence: float = Field(0, ge=0)
    strength: float = Field(0, ge=0)
    speed: float = Field(0, ge=0)
    durability: float = Field(0, ge=0)
    power: float = Field(0, ge=0)
    combat: float = Field(0, ge=0)


class CommentCreateRequest(BaseModel):
    text: str = Field(..., min_length=1)


# --- Responses ---


class ErrorResponse(BaseModel):
    detail: str | list[dict[str, object]]
    kind: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    database: str = "up"
