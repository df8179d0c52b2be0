from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from hero_catalog.core.errors import InvalidIdentifierError
from hero_catalog.models import Comment, Hero

HEROES_COLLECTION = "heroes"
COMMENTS_COLLECTION = "comments"


def to_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(value) from exc


def utcnow() -> datetime:
    """Current UTC time truncated to milliseconds, the precision BSON dates keep."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def stamp_timestamps(document: Mapping[str, Any]) -> dict[str, Any]:
    now = utcnow()
    stamped = dict(document)
    stamped.setdefault("createdAt", now)
    stamped.setdefault("updatedAt", now)
    return stamped


def hero_from_document(document: Mapping[str, Any]) -> Hero:
    data = dict(document)
    data["_id"] = str(data["_id"])
    return Hero.model_validate(data)


def comment_from_document(document: Mapping[str, Any]) -> Comment:
    data = dict(document)
    data["_id"] = str(data["_id"])
    data["hero"] = str(data["hero"])
    return Comment.model_validate(data)
