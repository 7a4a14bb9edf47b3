"""Rank animals by how rarely they have been favorited."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeVar

from homefurgood.data.schemas import Animal

AnimalT = TypeVar("AnimalT", bound=Animal)


def least_favorited(
    candidates: Sequence[AnimalT],
    counts: Mapping[str, int],
    limit: int,
) -> list[AnimalT]:
    """Select the least-favorited animals.

    Animals missing from ``counts`` have a count of 0: nobody has noticed
    them yet, which makes them the most in need rather than excluded.
    Ties are broken by ascending ID so repeated calls are reproducible.

    Args:
        candidates: Animals to rank. Not modified.
        counts: Favorite count per animal ID.
        limit: Maximum number of animals to return.

    Returns:
        Up to ``limit`` animals ordered by (count, id).
    """
    if limit <= 0:
        return []
    ranked = sorted(candidates, key=lambda a: (counts.get(a.id, 0), a.id))
    return ranked[:limit]


def rank_ids(counts: Mapping[str, int], limit: int) -> list[str]:
    """Order the IDs of a count mapping by (count, id) and keep ``limit``."""
    if limit <= 0:
        return []
    return sorted(counts, key=lambda animal_id: (counts[animal_id], animal_id))[:limit]
