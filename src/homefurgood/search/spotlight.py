"""Pick a small spotlight of under-noticed animals."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from homefurgood.data.normalizer import to_animal_detail, to_animal_list
from homefurgood.data.schemas import Animal, FilterSpec, SpotlightAnimal
from homefurgood.search.favorites import FavoriteCountSource
from homefurgood.search.query_builder import build_request
from homefurgood.search.ranking import least_favorited, rank_ids
from homefurgood.search.registry_client import RegistryClient

logger = logging.getLogger(__name__)

DEFAULT_SPOTLIGHT_LIMIT = 3
DEFAULT_SPOTLIGHT_RADIUS = 50


class SpotlightSelector:
    """Selects the least-favorited animals, near the user or app-wide.

    With a postal code, a radius search and the favorite counts are fetched
    concurrently and the search results are ranked (animals without
    favorites count as 0). Without one, only animals that appear in the
    count mapping are candidates, so animals nobody has favorited yet are
    never spotlighted app-wide. Both strategies degrade to an empty list on
    any failure.

    Args:
        registry: Client for the animal registry.
        favorites: Source of favorite counts.
        radius_miles: Search radius for the located strategy.
    """

    def __init__(
        self,
        registry: RegistryClient,
        favorites: FavoriteCountSource,
        radius_miles: int = DEFAULT_SPOTLIGHT_RADIUS,
    ) -> None:
        self.registry = registry
        self.favorites = favorites
        self.radius_miles = radius_miles

    def select(
        self, postal_code: str | None = None, limit: int = DEFAULT_SPOTLIGHT_LIMIT
    ) -> list[SpotlightAnimal]:
        """Return up to ``limit`` spotlight animals with their favorite counts.

        Never raises.
        """
        if limit <= 0:
            return []
        try:
            if postal_code and postal_code.strip():
                return self._select_located(postal_code.strip(), limit)
            return self._select_global(limit)
        except Exception:
            logger.warning(
                "Spotlight selection failed (postal_code=%s), returning none",
                postal_code,
                exc_info=True,
            )
            return []

    def _select_located(self, postal_code: str, limit: int) -> list[SpotlightAnimal]:
        request = build_request(
            FilterSpec(
                postal_code=postal_code,
                radius_miles=self.radius_miles,
                has_photo=True,
            )
        )
        with ThreadPoolExecutor(max_workers=2) as pool:
            search_future = pool.submit(self.registry.search, request)
            counts_future = pool.submit(self.favorites.get_favorite_counts)
            raw = search_future.result()
            counts = counts_future.result()

        candidates = to_animal_list(raw)
        selected = [
            _with_count(animal, counts.get(animal.id, 0))
            for animal in least_favorited(candidates, counts, limit)
        ]
        logger.info(
            "Located spotlight near %s: %d of %d candidates",
            postal_code,
            len(selected),
            len(candidates),
        )
        return selected

    def _select_global(self, limit: int) -> list[SpotlightAnimal]:
        counts = self.favorites.get_favorite_counts()
        ids = rank_ids(counts, limit)
        if not ids:
            logger.info("Global spotlight: no favorited animals yet")
            return []

        with ThreadPoolExecutor(max_workers=len(ids)) as pool:
            details = list(pool.map(self.registry.get_by_id, ids))
        selected = [
            _with_count(to_animal_detail(raw), counts[animal_id])
            for animal_id, raw in zip(ids, details)
        ]
        logger.info("Global spotlight: %d animals", len(selected))
        return selected


def _with_count(animal: Animal, favorite_count: int) -> SpotlightAnimal:
    return SpotlightAnimal(**animal.model_dump(), favorite_count=favorite_count)
