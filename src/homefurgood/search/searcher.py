"""Dog discovery: registry search, local breed filtering and spotlight."""

from __future__ import annotations

import logging
import time

from homefurgood.data.normalizer import to_animal_detail, to_animal_list
from homefurgood.data.schemas import (
    Animal,
    FilterSpec,
    SearchResponse,
    SpotlightAnimal,
)
from homefurgood.search.breeds import filter_by_breed
from homefurgood.search.query_builder import (
    BREED_SEARCH_PAGE_SIZE,
    SEARCH_PAGE_SIZE,
    build_request,
)
from homefurgood.search.registry_client import RegistryClient
from homefurgood.search.spotlight import DEFAULT_SPOTLIGHT_LIMIT, SpotlightSelector

logger = logging.getLogger(__name__)


class DogSearcher:
    """Entry point used by the API layer.

    Search and detail errors propagate unchanged so the caller can map them
    to HTTP statuses; the spotlight never raises.

    Args:
        registry: Client for the animal registry.
        spotlight: Spotlight selector sharing the same registry.
        page_size: Registry page size without a breed filter.
        breed_page_size: Registry page size with a breed filter.
    """

    def __init__(
        self,
        registry: RegistryClient,
        spotlight: SpotlightSelector,
        page_size: int = SEARCH_PAGE_SIZE,
        breed_page_size: int = BREED_SEARCH_PAGE_SIZE,
    ) -> None:
        self.registry = registry
        self.spotlight = spotlight
        self.page_size = page_size
        self.breed_page_size = breed_page_size

    def search_animals(self, spec: FilterSpec) -> SearchResponse:
        """Search the registry and filter the results by breed locally.

        Args:
            spec: User search criteria.

        Returns:
            SearchResponse with the matching animals.

        Raises:
            ProviderError: If the registry call fails.
        """
        start = time.monotonic()
        request = build_request(
            spec, page_size=self.page_size, breed_page_size=self.breed_page_size
        )
        raw = self.registry.search(request)
        animals = filter_by_breed(to_animal_list(raw), spec.breeds)

        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(
            "Search zip=%s breeds=%d: %d of %d records kept in %.1f ms",
            spec.postal_code,
            len(spec.breeds),
            len(animals),
            len(raw.data),
            elapsed_ms,
        )
        return SearchResponse(
            animals=animals,
            total=len(animals),
            count_returned=len(animals),
            page=request.page,
        )

    def get_animal(self, animal_id: str) -> Animal:
        """Fetch one animal for the detail view.

        Raises:
            NotFoundError: If the registry has no such animal.
            ProviderError: If the registry call fails.
        """
        return to_animal_detail(self.registry.get_by_id(animal_id))

    def get_spotlight(
        self, postal_code: str | None = None, limit: int = DEFAULT_SPOTLIGHT_LIMIT
    ) -> list[SpotlightAnimal]:
        """Least-favorited animals near ``postal_code``, or app-wide without one."""
        return self.spotlight.select(postal_code, limit)
