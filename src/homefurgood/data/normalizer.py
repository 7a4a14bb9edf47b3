"""Normalize raw RescueGroups payloads into canonical Animal records."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from bs4 import BeautifulSoup

from homefurgood.data.schemas import (
    Animal,
    BehaviorFlag,
    RawDetailResult,
    RawRecord,
    RawSearchResult,
)
from homefurgood.errors import NotFoundError

logger = logging.getLogger(__name__)

# Location attributes that may hold the rescue's own site, in priority order.
RESCUE_URL_FIELDS = ("url", "urlWeb", "website", "facebookUrl", "twitter", "instagram")

UrlStrategy = Callable[[RawRecord, RawRecord | None], str | None]


def to_animal_list(raw: RawSearchResult) -> list[Animal]:
    """Convert a search payload into list-view animals.

    Each record gets city/state from its first related location and its
    thumbnail as the primary photo.

    Args:
        raw: Registry search payload.

    Returns:
        Animals in registry order.
    """
    animals = []
    for record in raw.data:
        location = _find_location(record, raw.included)
        attrs = record.attributes
        animals.append(
            _build_animal(
                record,
                location,
                primary_photo_url=_text(attrs.get("pictureThumbnailUrl")),
                photo_urls=(),
                url=_text(attrs.get("url")),
            )
        )
    logger.debug("Normalized %d search records", len(animals))
    return animals


def to_animal_detail(raw: RawDetailResult) -> Animal:
    """Convert a detail payload into a display-ready animal.

    Args:
        raw: Registry detail payload.

    Returns:
        Animal with every picture, best photo and resolved URL.

    Raises:
        NotFoundError: If the payload holds no primary record.
    """
    record = _primary_record(raw)
    if record is None:
        raise NotFoundError("Dog not found")

    location = _find_location(record, raw.included)
    photos = _collect_photos(raw.included)
    thumbnail = _text(record.attributes.get("pictureThumbnailUrl"))
    return _build_animal(
        record,
        location,
        primary_photo_url=photos[0] if photos else thumbnail,
        photo_urls=tuple(photos),
        url=resolve_url(record, location),
    )


def resolve_url(
    record: RawRecord,
    location: RawRecord | None,
    strategies: Sequence[UrlStrategy] | None = None,
) -> str | None:
    """Pick the best outbound link for an animal.

    The rescue's own site is preferred over the animal's registry page
    because that is usually where the application or contact flow lives.

    Args:
        record: Primary animal record.
        location: Its resolved location, if any.
        strategies: Extractors tried in order; defaults to URL_STRATEGIES.

    Returns:
        First non-empty URL, or None.
    """
    for strategy in strategies or URL_STRATEGIES:
        url = strategy(record, location)
        if url:
            return url
    return None


def _rescue_site_url(record: RawRecord, location: RawRecord | None) -> str | None:
    if location is None:
        return None
    for field_name in RESCUE_URL_FIELDS:
        value = _text(location.attributes.get(field_name))
        if value:
            return value
    return None


def _animal_page_url(record: RawRecord, location: RawRecord | None) -> str | None:
    return _text(record.attributes.get("url"))


URL_STRATEGIES: tuple[UrlStrategy, ...] = (_rescue_site_url, _animal_page_url)


def description_from(attrs: dict[str, Any]) -> str | None:
    """Plain-text description, derived from HTML when no text is given.

    Tag stripping is best effort and not meant as sanitization.
    """
    text = _text(attrs.get("descriptionText"))
    if text:
        return text
    html = _text(attrs.get("descriptionHtml"))
    if not html:
        return None
    stripped = BeautifulSoup(html, "html.parser").get_text(" ", strip=True)
    return stripped or None


def _build_animal(
    record: RawRecord,
    location: RawRecord | None,
    *,
    primary_photo_url: str | None,
    photo_urls: tuple[str, ...],
    url: str | None,
) -> Animal:
    attrs = record.attributes
    loc_attrs = location.attributes if location is not None else {}
    return Animal(
        id=record.id,
        name=_text(attrs.get("name")),
        age_group=_text(attrs.get("ageGroup")),
        sex=_text(attrs.get("sex")),
        size_group=_text(attrs.get("sizeGroup")),
        breed_string=_text(attrs.get("breedString")) or "",
        city=_text(loc_attrs.get("city")),
        state=_text(loc_attrs.get("state")),
        distance_miles=_number(attrs.get("distance")),
        primary_photo_url=primary_photo_url,
        photo_urls=photo_urls,
        description_text=description_from(attrs),
        url=url,
        behavior_flags=frozenset(flag for flag in BehaviorFlag if _truthy(attrs.get(flag.value))),
    )


def _primary_record(raw: RawDetailResult) -> RawRecord | None:
    if isinstance(raw.data, list):
        return raw.data[0] if raw.data else None
    return raw.data


def _find_location(record: RawRecord, included: Sequence[RawRecord]) -> RawRecord | None:
    """Resolve the record's first related location from the side-table."""
    refs = (record.relationships.get("locations") or {}).get("data") or []
    if isinstance(refs, dict):
        refs = [refs]
    if not refs or not isinstance(refs[0], dict):
        return None
    location_id = str(refs[0].get("id", ""))
    if not location_id:
        return None
    for item in included:
        if item.type == "locations" and item.id == location_id:
            return item
    return None


def _collect_photos(included: Sequence[RawRecord]) -> list[str]:
    """Full-size picture URLs, ordered by the picture's ``order`` attribute."""
    pictures = []
    for position, item in enumerate(included):
        if item.type != "pictures":
            continue
        url = _picture_url(item.attributes)
        if url:
            order = _number(item.attributes.get("order"))
            pictures.append((order if order is not None else float("inf"), position, url))
    return [url for _, _, url in sorted(pictures)]


def _picture_url(attrs: dict[str, Any]) -> str | None:
    for size in ("original", "large"):
        variant = attrs.get(size)
        if isinstance(variant, dict):
            url = _text(variant.get("url"))
            if url:
                return url
    return None


def _text(value: Any) -> str | None:
    """Non-empty stripped string, or None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)
