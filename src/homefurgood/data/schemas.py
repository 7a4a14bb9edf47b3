"""Pydantic models for search criteria, provider payloads and animals."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class AgeGroup(str, Enum):
    BABY = "Baby"
    YOUNG = "Young"
    ADULT = "Adult"
    SENIOR = "Senior"


class SizeGroup(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    X_LARGE = "X-Large"


class BehaviorFlag(str, Enum):
    """Boolean animal attributes that can be required by a search.

    Values are the attribute names used by the registry.
    """

    DOGS_OK = "isDogsOk"
    CATS_OK = "isCatsOk"
    KIDS_OK = "isKidsOk"
    HOUSETRAINED = "isHousetrained"
    SPECIAL_NEEDS = "isSpecialNeeds"
    NEEDING_FOSTER = "isNeedingFoster"


class FilterSpec(BaseModel):
    """A user's search criteria before translation to a registry request.

    ``breeds`` is interpreted as OR: an animal matches when it satisfies at
    least one selected breed. Breed filtering is applied locally after the
    registry responds.
    """

    model_config = ConfigDict(frozen=True)

    postal_code: str | None = Field(default=None, description="ZIP code to search around")
    radius_miles: int = Field(default=50, gt=0, description="Search radius in miles")
    sex: Sex | None = None
    age_group: AgeGroup | None = None
    size_group: SizeGroup | None = None
    behavior_flags: frozenset[BehaviorFlag] = Field(
        default_factory=frozenset,
        description="Attributes that must be true",
    )
    breeds: tuple[str, ...] = Field(default=(), description="Selected breed names")
    has_photo: bool = Field(default=True, description="Only animals with pictures")

    @field_validator("postal_code", mode="before")
    @classmethod
    def blank_postal_code_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator("breeds", mode="before")
    @classmethod
    def clean_breeds(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(b.strip() for b in value if isinstance(b, str) and b.strip())


class Animal(BaseModel):
    """Canonical adoptable animal returned to callers.

    Built fresh by the normalizer on every pass and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Registry-assigned animal ID")
    name: str | None = None
    age_group: str | None = None
    sex: str | None = None
    size_group: str | None = None
    breed_string: str = Field(default="", description="Raw breed text for display")
    city: str | None = None
    state: str | None = None
    distance_miles: float | None = None
    primary_photo_url: str | None = None
    photo_urls: tuple[str, ...] = ()
    description_text: str | None = None
    url: str | None = None
    behavior_flags: frozenset[BehaviorFlag] = Field(default_factory=frozenset)


class FieldFilter(BaseModel):
    """A single equality filter in a registry search body."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    field_name: str = Field(alias="fieldName")
    operation: str = "equal"
    criteria: str


class RadiusFilter(BaseModel):
    """Distance constraint around a postal code."""

    model_config = ConfigDict(frozen=True)

    postalcode: str
    miles: int


class ExternalRequest(BaseModel):
    """A registry search request: body contents plus paging hints."""

    model_config = ConfigDict(frozen=True)

    filters: tuple[FieldFilter, ...] = ()
    filter_radius: RadiusFilter | None = None
    include: tuple[str, ...] = ("pictures", "locations")
    sort: tuple[str, ...] = ("animals.distance",)
    limit: int = 150
    page: int = 1
    has_photo: bool = True

    def to_body(self) -> dict:
        """Render the JSON:API request body expected by the registry.

        Returns:
            Dict ready to be sent as the POST payload.
        """
        data: dict[str, Any] = {
            "filters": [f.model_dump(by_alias=True) for f in self.filters],
        }
        if self.filter_radius is not None:
            data["filterRadius"] = self.filter_radius.model_dump()
        return {
            "data": data,
            "include": list(self.include),
            "sort": list(self.sort),
        }

    def to_params(self) -> dict:
        """Query-string paging parameters."""
        return {"limit": self.limit, "page": self.page}


class RawRecord(BaseModel):
    """One JSON:API resource object from the registry (animal, location, picture)."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    id: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("attributes", "relationships", mode="before")
    @classmethod
    def none_to_dict(cls, value: Any) -> Any:
        return {} if value is None else value


class RawSearchResult(BaseModel):
    """Raw registry search response: primary records plus included side-table."""

    model_config = ConfigDict(extra="ignore")

    data: list[RawRecord] = Field(default_factory=list)
    included: list[RawRecord] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", "included", mode="before")
    @classmethod
    def none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class RawDetailResult(BaseModel):
    """Raw registry detail response.

    ``data`` is a single object, a list, or absent when the ID is unknown.
    """

    model_config = ConfigDict(extra="ignore")

    data: RawRecord | list[RawRecord] | None = None
    included: list[RawRecord] = Field(default_factory=list)

    @field_validator("included", mode="before")
    @classmethod
    def none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class SearchResponse(BaseModel):
    """Response of a dog search.

    Breed filtering happens on a single registry page, so ``pages`` is
    always 1 and ``total`` equals ``count_returned``.
    """

    animals: list[Animal] = Field(default_factory=list)
    total: int = Field(default=0)
    count_returned: int = Field(default=0)
    page: int = Field(default=1)
    pages: int = Field(default=1)


class SpotlightAnimal(Animal):
    """An animal picked for the spotlight, with its favorite count."""

    favorite_count: int = Field(default=0, description="Times users favorited this animal")


class SpotlightResponse(BaseModel):
    """Response of the spotlight endpoint."""

    animals: list[SpotlightAnimal] = Field(default_factory=list)
