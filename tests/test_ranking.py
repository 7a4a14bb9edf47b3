"""Tests for homefurgood/search/ranking.py."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from homefurgood.data.schemas import Animal
from homefurgood.search.ranking import least_favorited, rank_ids


class TestLeastFavorited:
    """Tests for least-favorited ranking."""

    def test_sorted_ascending_by_count(self, make_animal: Callable[..., Animal]) -> None:
        """Lowest counts come first."""
        candidates = [make_animal("a"), make_animal("b"), make_animal("c")]
        counts = {"a": 5, "b": 0, "c": 2}
        assert [x.id for x in least_favorited(candidates, counts, 3)] == ["b", "c", "a"]

    def test_missing_count_is_zero(self, make_animal: Callable[..., Animal]) -> None:
        """Animals nobody has favorited rank first."""
        candidates = [make_animal("a"), make_animal("b")]
        assert [x.id for x in least_favorited(candidates, {"a": 5}, 1)] == ["b"]

    def test_ties_broken_by_id(self, make_animal: Callable[..., Animal]) -> None:
        """Equal counts are ordered by ascending ID regardless of input order."""
        candidates = [make_animal("z"), make_animal("m"), make_animal("b"), make_animal("q")]
        counts = {"z": 1, "m": 1, "b": 3}
        assert [x.id for x in least_favorited(candidates, counts, 4)] == ["q", "m", "z", "b"]

    def test_ids_compared_as_strings(self, make_animal: Callable[..., Animal]) -> None:
        """IDs are compared lexicographically."""
        candidates = [make_animal("9"), make_animal("10")]
        assert [x.id for x in least_favorited(candidates, {}, 2)] == ["10", "9"]

    @pytest.mark.parametrize("limit,expected", [(0, 0), (2, 2), (3, 3), (10, 3)])
    def test_length_is_min_of_limit_and_candidates(
        self, make_animal: Callable[..., Animal], limit: int, expected: int
    ) -> None:
        """Output length is min(limit, len(candidates))."""
        candidates = [make_animal("a"), make_animal("b"), make_animal("c")]
        assert len(least_favorited(candidates, {}, limit)) == expected

    def test_input_not_mutated(self, make_animal: Callable[..., Animal]) -> None:
        """The candidate list keeps its order."""
        candidates = [make_animal("c"), make_animal("a"), make_animal("b")]
        least_favorited(candidates, {"c": 0, "a": 9}, 2)
        assert [x.id for x in candidates] == ["c", "a", "b"]

    def test_repeatable(self, make_animal: Callable[..., Animal]) -> None:
        """Same inputs give the same output."""
        candidates = [make_animal(i) for i in ("d", "a", "c", "b")]
        counts = {"a": 1, "b": 1, "c": 1, "d": 1}
        first = least_favorited(candidates, counts, 2)
        assert least_favorited(list(reversed(candidates)), counts, 2) == first


class TestRankIds:
    """Tests for ranking the IDs of a count mapping."""

    def test_orders_by_count_then_id(self) -> None:
        """IDs are ordered by (count, id)."""
        assert rank_ids({"x": 2, "b": 1, "a": 1, "c": 7}, 3) == ["a", "b", "x"]

    def test_empty_mapping(self) -> None:
        """No favorites means no IDs."""
        assert rank_ids({}, 3) == []
