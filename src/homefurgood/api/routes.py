"""FastAPI routes for dog search, detail, spotlight and breeds."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request

from homefurgood.data.schemas import (
    AgeGroup,
    Animal,
    BehaviorFlag,
    FilterSpec,
    SearchResponse,
    Sex,
    SizeGroup,
    SpotlightResponse,
)
from homefurgood.search.breeds import DOG_BREEDS

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dogs", response_model=SearchResponse)
def search_dogs(
    request: Request,
    zip: str | None = None,
    miles: int = Query(default=50, gt=0),
    sex: Sex | None = None,
    age_group: AgeGroup | None = Query(default=None, alias="ageGroup"),
    size_group: SizeGroup | None = Query(default=None, alias="sizeGroup"),
    is_dogs_ok: bool = Query(default=False, alias="isDogsOk"),
    is_cats_ok: bool = Query(default=False, alias="isCatsOk"),
    is_kids_ok: bool = Query(default=False, alias="isKidsOk"),
    is_housetrained: bool = Query(default=False, alias="isHousetrained"),
    is_special_needs: bool = Query(default=False, alias="isSpecialNeeds"),
    is_needing_foster: bool = Query(default=False, alias="isNeedingFoster"),
    breeds: list[str] = Query(default=[]),  # noqa: B008
) -> SearchResponse:
    """Search adoptable dogs.

    Args:
        request: FastAPI request object.
        zip: Postal code to search around.
        miles: Radius around ``zip``.
        breeds: Repeated breed names, matched with OR.

    Returns:
        SearchResponse as JSON.
    """
    requested = {
        BehaviorFlag.DOGS_OK: is_dogs_ok,
        BehaviorFlag.CATS_OK: is_cats_ok,
        BehaviorFlag.KIDS_OK: is_kids_ok,
        BehaviorFlag.HOUSETRAINED: is_housetrained,
        BehaviorFlag.SPECIAL_NEEDS: is_special_needs,
        BehaviorFlag.NEEDING_FOSTER: is_needing_foster,
    }
    spec = FilterSpec(
        postal_code=zip,
        radius_miles=miles,
        sex=sex,
        age_group=age_group,
        size_group=size_group,
        behavior_flags=frozenset(flag for flag, wanted in requested.items() if wanted),
        breeds=breeds,
    )
    searcher = request.app.state.searcher
    return searcher.search_animals(spec)


@router.get("/dogs/{animal_id}", response_model=Animal)
def get_dog(request: Request, animal_id: str) -> Animal:
    """Detail view of one dog; 404 when the registry has no such dog."""
    searcher = request.app.state.searcher
    return searcher.get_animal(animal_id)


@router.get("/spotlight", response_model=SpotlightResponse)
def spotlight(
    request: Request,
    zip: str | None = None,
    limit: int = Query(default=3, ge=1, le=20),
) -> SpotlightResponse:
    """Least-favorited dogs near ``zip``, or across the app without one."""
    searcher = request.app.state.searcher
    return SpotlightResponse(animals=searcher.get_spotlight(zip, limit))


@router.get("/breeds")
def list_breeds() -> dict:
    """Curated breed names for breed pickers."""
    logger.debug("Serving %d breeds", len(DOG_BREEDS))
    return {"breeds": DOG_BREEDS}


@router.get("/health")
def health_check() -> dict:
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "home-fur-good"}
