"""Tests for homefurgood/search/searcher.py."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from homefurgood.data.schemas import FilterSpec, RawDetailResult, RawSearchResult, SearchResponse
from homefurgood.errors import NotFoundError, ProviderError
from homefurgood.search.searcher import DogSearcher


@pytest.fixture
def mock_spotlight() -> MagicMock:
    """Create a mock SpotlightSelector."""
    mock = MagicMock()
    mock.select.return_value = []
    return mock


@pytest.fixture
def searcher(mock_registry: MagicMock, mock_spotlight: MagicMock) -> DogSearcher:
    """DogSearcher with mocked collaborators."""
    return DogSearcher(mock_registry, mock_spotlight)


class TestSearchAnimals:
    """Tests for DogSearcher.search_animals."""

    def test_breed_filter_end_to_end(
        self, searcher: DogSearcher, mock_registry: MagicMock, raw_search: RawSearchResult
    ) -> None:
        """Only the Beagle mix survives a Beagle search."""
        mock_registry.search.return_value = raw_search
        spec = FilterSpec(postal_code="01938", radius_miles=50, breeds=["Beagle"])

        response = searcher.search_animals(spec)

        assert isinstance(response, SearchResponse)
        assert [a.breed_string for a in response.animals] == ["Beagle Mix"]
        assert response.total == 1
        assert response.page == 1
        assert response.count_returned == 1
        assert response.pages == 1

    def test_request_excludes_breed(
        self, searcher: DogSearcher, mock_registry: MagicMock, raw_search: RawSearchResult
    ) -> None:
        """The registry request has the radius and the larger page size."""
        mock_registry.search.return_value = raw_search
        searcher.search_animals(FilterSpec(postal_code="01938", breeds=["Beagle"]))

        request = mock_registry.search.call_args.args[0]
        assert request.limit == 200
        assert request.filter_radius.postalcode == "01938"
        assert request.filters == ()

    def test_no_breeds_keeps_everything(
        self, searcher: DogSearcher, mock_registry: MagicMock, raw_search: RawSearchResult
    ) -> None:
        """Without breeds every record is returned."""
        mock_registry.search.return_value = raw_search
        response = searcher.search_animals(FilterSpec())
        assert [a.id for a in response.animals] == ["101", "102"]

    def test_provider_error_propagates(self, searcher: DogSearcher, mock_registry: MagicMock) -> None:
        """Registry failures are not swallowed."""
        mock_registry.search.side_effect = ProviderError("bad gateway", status=502)
        with pytest.raises(ProviderError):
            searcher.search_animals(FilterSpec())


class TestGetAnimal:
    """Tests for DogSearcher.get_animal."""

    def test_returns_detail(
        self, searcher: DogSearcher, mock_registry: MagicMock, raw_detail: RawDetailResult
    ) -> None:
        """Should normalize the detail payload."""
        mock_registry.get_by_id.return_value = raw_detail
        animal = searcher.get_animal("101")
        assert animal.id == "101"
        assert animal.description_text == "Hi"
        mock_registry.get_by_id.assert_called_once_with("101")

    def test_not_found(self, searcher: DogSearcher) -> None:
        """An empty payload raises NotFoundError."""
        with pytest.raises(NotFoundError):
            searcher.get_animal("404")


class TestGetSpotlight:
    """Tests for DogSearcher.get_spotlight."""

    def test_delegates(self, searcher: DogSearcher, mock_spotlight: MagicMock) -> None:
        """Should pass the postal code and limit to the selector."""
        searcher.get_spotlight("01938", limit=5)
        mock_spotlight.select.assert_called_once_with("01938", 5)

    def test_default_limit(self, searcher: DogSearcher, mock_spotlight: MagicMock) -> None:
        """The default spotlight size is three."""
        searcher.get_spotlight()
        mock_spotlight.select.assert_called_once_with(None, 3)
