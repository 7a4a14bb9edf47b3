"""Shared test fixtures for the Home Fur Good test suite."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from homefurgood.data.schemas import Animal, RawDetailResult, RawSearchResult


@pytest.fixture
def search_payload() -> dict:
    """Registry search response with a Beagle mix and a Poodle."""
    return {
        "meta": {"count": 2},
        "data": [
            {
                "type": "animals",
                "id": "101",
                "attributes": {
                    "name": "Copper",
                    "ageGroup": "Young",
                    "sex": "Male",
                    "sizeGroup": "Medium",
                    "breedString": "Beagle Mix",
                    "distance": 4.2,
                    "pictureThumbnailUrl": "https://img.example/101-thumb.jpg",
                    "url": "https://rescuegroups.example/animals/101",
                    "isDogsOk": True,
                    "isKidsOk": False,
                },
                "relationships": {
                    "locations": {"data": [{"type": "locations", "id": "L1"}]}
                },
            },
            {
                "type": "animals",
                "id": "102",
                "attributes": {
                    "name": "Fifi",
                    "breedString": "Poodle",
                    "distance": 12,
                },
                "relationships": {},
            },
        ],
        "included": [
            {
                "type": "locations",
                "id": "L1",
                "attributes": {"city": "Beverly", "state": "MA"},
            },
            {
                "type": "pictures",
                "id": "P9",
                "attributes": {"original": {"url": "https://img.example/101-1.jpg"}},
            },
        ],
    }


@pytest.fixture
def detail_payload() -> dict:
    """Registry detail response for one dog with two pictures."""
    return {
        "data": [
            {
                "type": "animals",
                "id": "101",
                "attributes": {
                    "name": "Copper",
                    "breedString": "Beagle Mix",
                    "pictureThumbnailUrl": "https://img.example/101-thumb.jpg",
                    "url": "https://rescuegroups.example/animals/101",
                    "descriptionHtml": "<p>Hi</p>",
                },
                "relationships": {
                    "locations": {"data": [{"type": "locations", "id": "L1"}]}
                },
            }
        ],
        "included": [
            {
                "type": "pictures",
                "id": "P2",
                "attributes": {
                    "order": 2,
                    "original": {"url": "https://img.example/101-2.jpg"},
                },
            },
            {
                "type": "pictures",
                "id": "P1",
                "attributes": {
                    "order": 1,
                    "original": {"url": "https://img.example/101-1.jpg"},
                },
            },
            {
                "type": "locations",
                "id": "L1",
                "attributes": {
                    "city": "Beverly",
                    "state": "MA",
                    "urlWeb": "https://northshore-rescue.example",
                },
            },
        ],
    }


@pytest.fixture
def raw_search(search_payload: dict) -> RawSearchResult:
    """Parsed search payload."""
    return RawSearchResult.model_validate(search_payload)


@pytest.fixture
def raw_detail(detail_payload: dict) -> RawDetailResult:
    """Parsed detail payload."""
    return RawDetailResult.model_validate(detail_payload)


@pytest.fixture
def make_animal() -> Callable[..., Animal]:
    """Factory for Animal records with only the fields a test cares about."""

    def _make(animal_id: str, **fields: object) -> Animal:
        return Animal(id=animal_id, **fields)

    return _make


@pytest.fixture
def mock_registry() -> MagicMock:
    """Create a mock RegistryClient returning empty payloads."""
    mock = MagicMock()
    mock.search.return_value = RawSearchResult()
    mock.get_by_id.return_value = RawDetailResult()
    return mock
