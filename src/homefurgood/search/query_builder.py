"""Translate a FilterSpec into a RescueGroups search request."""

from __future__ import annotations

from homefurgood.data.schemas import (
    BehaviorFlag,
    ExternalRequest,
    FieldFilter,
    FilterSpec,
    RadiusFilter,
)

SEARCH_PAGE_SIZE = 150
BREED_SEARCH_PAGE_SIZE = 200

# Registry encoding for a true boolean attribute.
TRUE_CRITERIA = "1"


def build_request(
    spec: FilterSpec,
    page_size: int = SEARCH_PAGE_SIZE,
    breed_page_size: int = BREED_SEARCH_PAGE_SIZE,
) -> ExternalRequest:
    """Build a registry search request from user criteria.

    Breed is never sent to the registry; it is filtered locally after
    normalization. A larger page is requested when breeds are selected to
    make up for the records the local filter will drop.

    Args:
        spec: User search criteria.
        page_size: Result limit when no breed is selected.
        breed_page_size: Result limit when at least one breed is selected.

    Returns:
        ExternalRequest for RegistryClient.search.
    """
    return ExternalRequest(
        filters=tuple(_build_filters(spec)),
        filter_radius=_build_radius(spec),
        limit=breed_page_size if spec.breeds else page_size,
        page=1,
        has_photo=spec.has_photo,
    )


def _build_filters(spec: FilterSpec) -> list[FieldFilter]:
    """Equality filters for present attributes and true behavior flags.

    Absent flags are omitted rather than sent as "0", so "don't care" and
    "must be false" cannot be distinguished.
    """
    filters = [
        _equal(f"animals.{field_name}", value.value)
        for field_name, value in (
            ("sex", spec.sex),
            ("ageGroup", spec.age_group),
            ("sizeGroup", spec.size_group),
        )
        if value is not None
    ]
    for flag in BehaviorFlag:
        if flag in spec.behavior_flags:
            filters.append(_equal(f"animals.{flag.value}", TRUE_CRITERIA))
    return filters


def _build_radius(spec: FilterSpec) -> RadiusFilter | None:
    if not spec.postal_code:
        return None
    return RadiusFilter(postalcode=spec.postal_code, miles=spec.radius_miles)


def _equal(field_name: str, criteria: str) -> FieldFilter:
    return FieldFilter(field_name=field_name, operation="equal", criteria=criteria)
