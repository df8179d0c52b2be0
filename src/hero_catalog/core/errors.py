"""Domain errors raised by the query layer and the stores.

Each error carries a ``kind`` tag; the API maps kinds to HTTP status codes.
"""

from __future__ import annotations


class HeroCatalogError(Exception):
    """Base class for errors the API translates into HTTP responses."""

    kind = "error"


class InvalidIdentifierError(HeroCatalogError, ValueError):
    """Raised when an identifier is not a 24-character hex ObjectId."""

    kind = "invalid_identifier"

    def __init__(self, value: str) -> None:
        super().__init__(f"Malformed identifier: {value!r}")
        self.value = value


class HeroNotFoundError(HeroCatalogError, LookupError):
    kind = "not_found"

    def __init__(self, hero_id: str) -> None:
        super().__init__(f"Hero {hero_id} not found")
        self.hero_id = hero_id


class StoreUnavailableError(HeroCatalogError):
    """Raised when the document store cannot be reached or rejects an operation."""

    kind = "store_unavailable"
