"""Shared fixtures and helpers for tests."""

import itertools
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from hero_catalog.core.query import STAT_FIELDS
from hero_catalog.db import InMemoryHeroStore

_REPO_ROOT = Path(__file__).parent.parent

HeroDocumentFactory = Callable[..., dict[str, Any]]


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Hero documents shaped like the imported catalog
# ---------------------------------------------------------------------------

_original_ids = itertools.count(1)


def make_hero_document(name: str, **powerstats: float) -> dict[str, Any]:
    """Build a full hero document; unspecified powerstats default to 50."""
    original_id = next(_original_ids)
    slug = f"{original_id}-{name.lower().replace(' ', '-')}"
    stats: dict[str, float] = dict.fromkeys(STAT_FIELDS, 50)
    stats.update(powerstats)
    return {
        "original_id": original_id,
        "name": name,
        "slug": slug,
        "powerstats": stats,
        "appearance": {
            "gender": "Male",
            "race": "Human",
            "height": ["6'0", "183 cm"],
            "weight": ["180 lb", "81 kg"],
            "eyeColor": "Blue",
            "hairColor": "Black",
        },
        "biography": {
            "fullName": name,
            "alterEgos": "No alter egos found.",
            "aliases": [name.upper()],
            "placeOfBirth": "-",
            "firstAppearance": "Issue #1",
            "publisher": "Marvel Comics",
            "alignment": "good",
        },
        "work": {"occupation": "-", "base": "-"},
        "connections": {"groupAffiliation": "-", "relatives": "-"},
        "images": {size: f"https://cdn.example.org/images/{size}/{slug}.jpg" for size in ("xs", "sm", "md", "lg")},
    }


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hero_document() -> HeroDocumentFactory:
    return make_hero_document


@pytest.fixture
def in_memory_store() -> InMemoryHeroStore:
    return InMemoryHeroStore()
